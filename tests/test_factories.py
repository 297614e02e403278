import pytest

from patternkit.factories import (
    ConsoleLogger,
    FileLogger,
    ShapeFactory,
    new_logger,
    new_notifier,
    new_payment_processor,
)


@pytest.mark.parametrize(
    "name, drawing",
    [("circle", "Drawing a Circle"), ("square", "Drawing a Square")],
)
def test_shape_factory_creates_known_shapes(name, drawing):
    assert ShapeFactory().create_shape(name).draw() == drawing


def test_shape_factory_unknown_gives_none():
    assert ShapeFactory().create_shape("triangle") is None


def test_console_logger_writes_to_stderr(capsys):
    logger = new_logger("console")
    assert isinstance(logger, ConsoleLogger)
    logger.info("started")
    logger.error("failed")
    assert capsys.readouterr().err == "INFO: started\nERROR: failed\n"


def test_file_logger_appends_across_instances(tmp_path):
    path = tmp_path / "app.log"
    with new_logger("file", str(path)) as logger:
        assert isinstance(logger, FileLogger)
        logger.info("one")
    with FileLogger(str(path)) as logger:
        logger.error("two")
    assert path.read_text(encoding="utf-8") == "INFO: one\nERROR: two\n"


def test_file_logger_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        new_logger("file", str(tmp_path / "missing" / "app.log"))


def test_unknown_logger_type_raises():
    with pytest.raises(ValueError, match="unsupported logger type: syslog"):
        new_logger("syslog", "")


@pytest.mark.parametrize("channel, label", [("email", "EMAIL"), ("sms", "SMS")])
def test_notifiers_send(capsys, channel, label):
    new_notifier(channel).send("someone@example.com", "hi")
    assert capsys.readouterr().out == f"Sending {label} to someone@example.com: hi\n"


def test_unknown_channel_raises():
    with pytest.raises(ValueError, match="unsupported channel: fax"):
        new_notifier("fax")


@pytest.mark.parametrize("provider, label", [("stripe", "Stripe"), ("paypal", "PayPal")])
def test_payment_processors_charge(capsys, provider, label):
    new_payment_processor(provider).charge(100.0)
    assert capsys.readouterr().out == f"Charged $100.00 using {label}\n"


def test_unknown_provider_raises():
    with pytest.raises(ValueError, match="unsupported payment provider: cash"):
        new_payment_processor("cash")