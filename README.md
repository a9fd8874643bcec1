# nacoskit

Building blocks for programs that talk to Nacos naming and configuration
servers: client and server settings, request parameter objects, service
models, an HTTP agent, server addressing with request signing and
server-list parsing, an error type, a process-wide logger, a few small
utilities and an RFC 4122 UUID library.

## Installation

```
pip install nacoskit
```

To run the test suite:

```
pip install "nacoskit[test]"
pytest
```

## Settings (`nacoskit.constant`)

```python
from nacoskit.constant import new_client_config, new_server_config

server = new_server_config("127.0.0.1", 8848)
print(server.scheme, server.context_path)       # http /nacos

client = new_client_config(timeout_ms=5000, log_level="debug")
print(client.timeout_ms, client.beat_interval)  # 5000 5000
```

`new_client_config` starts from these defaults: `timeout_ms=10000`,
`beat_interval=5000`, `update_thread_num=20`, `cache_dir` and `log_dir`
set to `cache` and `log` next to the running program, `rotate_time="24h"`,
`max_age=3` and `log_level="info"`. Keyword arguments override any
`ClientConfig` field; an unknown keyword raises `TypeError`.
`new_server_config` works the same way for `ServerConfig`.

The module also holds the metadata keys the naming server reserves:
`HEART_BEAT_TIMEOUT`, `IP_DELETE_TIMEOUT` and `HEART_BEAT_INTERVAL`.

## Request parameters (`nacoskit.vo`)

Dataclasses such as `ConfigParam`, `SearchConfigParam`,
`RegisterInstanceParam`, `DeregisterInstanceParam`, `GetServiceParam`,
`SubscribeParam` and `SelectInstancesParam` describe requests. Their fields
carry the server's parameter names, so they can be flattened with
`transform_object_to_param`:

```python
from nacoskit.util.object2param import transform_object_to_param
from nacoskit.vo import RegisterInstanceParam

param = RegisterInstanceParam(ip="10.0.0.10", port=8848, service_name="demo.go",
                              weight=10, enable=True, healthy=True)
transform_object_to_param(param)
# {'ip': '10.0.0.10', 'port': '8848', 'weight': '10', 'enabled': 'true',
#  'healthy': 'true', 'serviceName': 'demo.go', 'ephemeral': 'false'}
```

Empty strings, empty string lists and missing maps are left out; maps are
encoded as JSON.

## Models (`nacoskit.model`)

Dataclasses for what the servers return: `Service`, `Instance`,
`ConfigItem`, `ConfigPage`, `ServiceDetail`, `Cluster`, `SubscribeService`,
`BeatInfo`, `ServiceList` and others. `Service.from_dict` and
`Instance.from_dict` read the server's JSON objects, `to_dict` writes them
back. `nacoskit.util.common.json_to_service` parses a JSON string and
returns `None` if it cannot be read.

## Server addresses, signing and server lists (`nacoskit.nacos_server`)

```python
from nacoskit.constant import ServerConfig
from nacoskit.nacos_server import get_address, parse_server_list

cfg = ServerConfig(scheme="https", context_path="/nacos", ip_addr="nacos.example.com", port=80)
get_address(cfg)   # 'https://nacos.example.com:80'

parse_server_list("10.0.0.1:8848\n10.0.0.2\n", "/nacos")
# two ServerConfig entries; a missing port becomes 8848
```

`get_sign_headers(params, headers)` returns the `timeStamp` and
`Spas-Signature` headers of a configuration request, signing
`tenant+group+timestamp` (or `group+timestamp`, or the timestamp alone)
with the `secretKey` header through `sign_with_hmac_sha1`.

## HTTP agent (`nacoskit.http_agent`)

```python
from nacoskit.http_agent import HttpAgent

agent = HttpAgent()
body = agent.request_only_result("GET", "http://127.0.0.1:8848/nacos/v1/ns/service/list",
                                 None, 3000, {"pageNo": "1", "pageSize": "10"})
```

GET and DELETE append the parameters to the query string, POST sends them
form-encoded, PUT sends the non-empty ones in the body. `request` raises
`HttpAgentError` for an unsupported method or a failed request and returns
an `HttpResponse`; `request_only_result` returns the body of a 200
response and an empty string on any failure. `fake_http_response` builds
an `HttpResponse` without a server.

## Errors (`nacoskit.nacos_error`)

```python
from nacoskit.nacos_error import NacosError

err = NacosError("", "config not found", None)
str(err)           # '[SDK.NacosError] config not found'
err.error_code()   # 'SDK.NacosError'
```

When an `origin_error` is given it is appended after `caused by:`.

## Utilities (`nacoskit.util`)

```python
from nacoskit.util.md5 import md5
from nacoskit.util.semaphore import Semaphore

md5("demo")   # 'fe01ce2a7fbac8fafaed7c982a04e229'

sem = Semaphore(2)
sem.try_acquire()          # True
sem.available_permits()    # 1
sem.release()
```

`Semaphore` also works as a context manager. `nacoskit.util.common` has
`current_millis`, `to_json_string`, `get_url_formed_map`,
`get_duration_with_default`, and local IPv4 discovery with `local_ip`,
which skips networks added by `set_filter_net_number_and_mask`
(checked with `is_filtered_ip`).

## UUIDs (`nacoskit.uuidgen`)

```python
from nacoskit.uuidgen.uuid import from_string
from nacoskit.uuidgen.generator import new_v4, new_v5

ns = from_string("6ba7b810-9dad-11d1-80b4-00c04fd430c8")
str(new_v5(ns, "www.example.com"))   # '2ed6657d-e927-568b-95e1-2665a8aea6a2'
new_v4().version()                   # 4
```

Canonical, braced, URN and hash-like text forms are accepted; bad input
raises `UUIDError`. Versions 1 to 5 can be generated, and `Generator`
takes its own clock, hardware address and random source.
`nacoskit.uuidgen.sql` converts UUIDs to and from database values
(`uuid_value`, `scan_uuid`, `NullUUID`).

## Logging (`nacoskit.logger`)

```python
from nacoskit import logger
from nacoskit.logger import LoggerConfig

logger.init_logger(LoggerConfig(level="debug", output_path="/tmp/nacos/log",
                                rotation_time="1h", max_age=3))
logger.info("registered %s", "demo.go")
```

By default messages go to standard error. `init_logger` switches to a
`nacos-sdk.log` file under `output_path`, rotated every `rotation_time`
with `max_age` old files kept; `set_logger` installs any object with
`info`, `warn`, `error` and `debug` methods.

## What it does not do

There is no ready-made naming or configuration client here: nothing
registers instances, sends heartbeats, publishes or listens to
configuration, or caches service information on disk. Nor does the
package log in to a server or refresh a server list from an endpoint on
its own; it provides the settings, parameter objects, models, HTTP agent,
signing and server-list parsing such a client is built from. It has no
command-line tool.