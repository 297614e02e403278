# patternkit

A collection of small, self-contained implementations of classic design
patterns. Each module shows one family of patterns through a runnable
example that you can import, call and build on.

## Installation

```
pip install patternkit
```

The package depends on `pyyaml` (for YAML configuration files) and `redis`
(for the Redis-backed cache).

For running the test suite:

```
pip install "patternkit[test]"
pytest
```

## What is inside

| Module | Pattern | Main names |
| --- | --- | --- |
| `patternkit.http_builder` | Builder | `RequestBuilder`, `HTTPRequest` |
| `patternkit.sql_builder` | Builder | `SQLBuilder` |
| `patternkit.prototypes` | Prototype | `JobConfig`, `prepare_jobs`, `run_etl`, `launch_cron`, `RequestPrototype` |
| `patternkit.factories` | Factory | `ShapeFactory`, `new_logger`, `new_notifier`, `new_payment_processor` |
| `patternkit.adapters` | Adapter | `FileConfigAdapter`, `AppConfig`, `AudioPlayer`, `MediaAdapter`, `StripeAdapter`, `PayPalAdapter`, `process_payment` |
| `patternkit.decorators` | Decorator | `cached`, `retry`, `RetryError`, `Espresso`, `Milk`, `Sugar`, `hello_app`, `with_logging` |
| `patternkit.chain` | Chain of responsibility | `Manager`, `Director`, `CEO`, `build_approval_chain`, `Chain`, `default_chain` |
| `patternkit.commands` | Command | `TransactionManager`, `InsertCommand`, `RemoteControl`, `LightOnCommand`, `LightOffCommand` |
| `patternkit.facades` | Facade | `ComputerFacade`, `HomeTheaterFacade` |
| `patternkit.iterators` | Iterator | `IntSlice`, `BinaryTree`, `inorder`, `file_lines` |
| `patternkit.mediators` | Mediator | `ChatRoom`, `User`, `GameServer`, `Player` |
| `patternkit.observers` | Observer | `SimpleChatRoom`, `ChatUser`, `Person`, `ChangeLogger`, `Stock`, `WeatherStation` |
| `patternkit.proxies` | Proxy | `AuthProxy`, `AccessDenied`, `ProxyImage` |
| `patternkit.visitors` | Visitor | `TextNode`, `LinkNode`, `HTMLVisitor`, `PlainTextVisitor`, `build_doc` |
| `patternkit.articles` | Model | `ArticleStore`, `Article` |
| `patternkit.cache` | Constructor | `new_cache`, `CacheConfig`, `MemoryCache`, `RedisCache` |

Most example classes report what they do by printing to standard output;
`ConsoleLogger` and `run_etl` print to standard error.

## Examples

Building a SQL query step by step:

```python
from patternkit.sql_builder import SQLBuilder

query = (
    SQLBuilder()
    .select("u.id", "u.name")
    .from_("users u")
    .where("u.active = TRUE")
    .limit(100)
    .build()
)
print(query)
# SELECT u.id, u.name FROM users u WHERE u.active = TRUE LIMIT 100
```

A negative `limit` or `offset` raises `ValueError` from that step, and
`build()` raises `ValueError` when no table was given.

Building an HTTP request description:

```python
from patternkit.http_builder import RequestBuilder

request = (
    RequestBuilder()
    .method("POST")
    .url("https://api.example.com/v1/orders")
    .header("Content-Type", "application/json")
    .retries(3, 0.5)
    .timeout(5)
    .build()
)
```

An empty method, a URL that is not a valid request target, a negative retry
count or a timeout that is not positive raise `ValueError`.

Creating objects through a factory:

```python
from patternkit.factories import ShapeFactory, new_notifier

print(ShapeFactory().create_shape("circle").draw())   # Drawing a Circle
new_notifier("email").send("someone@example.com", "Your order shipped")
```

Unknown shape names give `None`; unknown logger, notifier and payment
provider names raise `ValueError`.

Loading configuration by file extension:

```python
from patternkit.adapters import AppConfig, FileConfigAdapter

config = AppConfig.from_mapping(FileConfigAdapter().load("config.yaml"))
```

`.json`, `.yaml` and `.yml` files are supported; anything else raises
`UnsupportedFormatError`.

Wrapping functions with a cache or with retries:

```python
from patternkit.decorators import cached, retry

@cached
def lookup(key):
    return f"Value for {key}"

lookup("foo")   # computed
lookup("foo")   # served from the cache

call = retry(lambda: lookup("bar"), max_attempts=3, backoff=0.5)
call()          # RetryError if all three attempts raise
```

Walking a binary tree in order:

```python
from patternkit.iterators import Node, BinaryTree

tree = BinaryTree(Node(2, Node(1), Node(3)))
print([node.value for node in tree])   # [1, 2, 3]
```

Serving the middleware chain with the standard library's WSGI server:

```python
from wsgiref.simple_server import make_server
from patternkit.chain import default_chain

make_server("localhost", 8080, default_chain()).serve_forever()
```

Requests without an `X-Auth-Token: secret` header receive `403 Forbidden`;
others reach `final_handler`. `decorators.with_logging(hello_app)` is another
WSGI application you can serve the same way.

## Command line

The package installs one command that runs four sample leave requests
(1, 4, 7 and 12 days) through the approval chain: the manager approves up to
2 days, the director up to 5, the CEO up to 10, and longer requests are
rejected.

```
patternkit-leave
```

## What the package does not do

- It does not start a web server of its own; the WSGI applications in
  `patternkit.chain` and `patternkit.decorators` need one, such as `wsgiref`.
- It connects to no database: `commands.Database` only prints the statements
  it would run, and `articles.ArticleStore` keeps articles in memory.
- Notifiers, payment processors and payment adapters print what they would
  do; they send no messages and charge nothing.
- `http_builder.RequestBuilder` only describes a request; it does not send
  it. `RequestPrototype.build()` returns a `urllib` request and a client
  whose `do()` method sends it.
- There are no metrics exporters, remote procedure call clients or message
  bus services.