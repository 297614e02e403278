import threading

import pytest

from patternkit.proxies import AccessDenied, AuthProxy, ProxyImage, RealService


class RecordingService:
    def __init__(self):
        self.users = []

    def perform_action(self, user):
        self.users.append(user)


def test_allowed_user_is_forwarded():
    service = RecordingService()
    proxy = AuthProxy(service, ["alice", "bob"])
    proxy.perform_action("alice")
    assert service.users == ["alice"]


def test_denied_user_raises_and_is_not_forwarded():
    service = RecordingService()
    proxy = AuthProxy(service, ["alice", "bob"])
    with pytest.raises(AccessDenied, match="access denied for user: eve"):
        proxy.perform_action("eve")
    assert service.users == []


def test_access_denied_is_permission_error():
    proxy = AuthProxy(RealService(), [])
    with pytest.raises(PermissionError):
        proxy.perform_action("alice")


def test_real_service_output(capsys):
    AuthProxy(RealService(), ["alice"]).perform_action("alice")
    assert capsys.readouterr().out == "Action performed for user alice\n"


def test_proxy_image_loads_lazily_once(capsys):
    image = ProxyImage("photo.png", load_delay=0)
    assert capsys.readouterr().out == ""
    image.display()
    image.display()
    out = capsys.readouterr().out
    assert out.count("Loading image from disk: photo.png") == 1
    assert out.count("Displaying image: photo.png") == 2


def test_proxy_image_concurrent_display_loads_once(capsys):
    image = ProxyImage("photo.png", load_delay=0.05)
    threads = [threading.Thread(target=image.display) for _ in range(5)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    out = capsys.readouterr().out
    assert out.count("Loading image from disk") == 1
    assert out.count("Displaying image") == 5