# healthmon

A small HTTP health monitor. Worker threads send GET requests to a list of
URLs over and over, and a reporting thread prints a line whenever a URL is
down, slow, or changes between up and down. When you stop it, it prints
totals for the run.

It uses only the Python standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running

```
healthmon
healthmon --config path/to/config.json
```

`-c` / `--config` names the JSON configuration file; the default is
`config.json` in the current directory. Five worker threads run the checks.

The monitor runs until you press Ctrl+C or send it SIGTERM. It then prints
the final statistics and exits with status 0:

```
Final Statistics:
Total Checks: 42
Successful: 40
Failed: 2
Slow Responses: 1
```

While it runs, it prints lines like these:

- `❌ <url> is DOWN: <error>`: the request failed or returned status 400 or above
- `⚠️ <url> is SLOW: <time>`: the response took longer than one second
- `🔄 <url> status changed: <old> -> <new>`: the URL went from up to down or
  back; a successful check is shown as `ok`

## Configuration

```json
{
  "urls": ["https://service.example.com/health"],
  "check_interval": 30,
  "timeout_seconds": 5,
  "slow_threshold": 1000
}
```

| Key               | Meaning                                              | Default |
|-------------------|------------------------------------------------------|---------|
| `urls`            | URLs to check                                        | none    |
| `check_interval`  | seconds; loaded into `Config`, not used by the loop  | 30      |
| `timeout_seconds` | request timeout in seconds (0 or less: no timeout)   | 5       |
| `slow_threshold`  | milliseconds above which `Result.is_slow` is set     | 1000    |

Keys are matched without regard to case; unknown keys are ignored. If the
file cannot be read it is ignored. If it holds invalid JSON, or a value of
the wrong type, `load_config` raises `ValueError` and the command prints
`Error loading config: ...` and exits with status 1.

Environment variables take precedence over the file:

- `HEALTH_CHECK_URLS`: a single URL to check
- `CHECK_INTERVAL`
- `TIMEOUT_SECONDS`
- `SLOW_THRESHOLD`

A numeric variable that is not a valid integer is ignored.

## Library use

```python
import threading

from healthmon.checker import Checker
from healthmon.reporter import ConsoleReporter
from healthmon.aggregator import Aggregator

checker = Checker("https://service.example.com/health", 5, 1000)
result = checker.ping()
print(result.status, result.response_time, result.error, result.is_slow)

reporter = ConsoleReporter()
aggregator = Aggregator([checker], reporter, 2)
cancel = threading.Event()
aggregator.start(cancel)
# ... later
aggregator.stop()
print(reporter.get_stats())
```

- `healthmon.config.load_config(path)` returns a `Config` built from the
  defaults, the JSON file at `path` and the environment variables above.
- `Checker.ping()` returns a `Result` with `url`, `status`, `response_time`
  (seconds), `error` (a message, or `None`), `timestamp`, `details`
  (`content_length`, `content_type`) and `is_slow`.
- `ConsoleReporter(out=None)` prints to `out`, or to standard output; it is a
  `HealthReporter`, whose `report(result)` and `get_stats()` you can implement
  for other destinations. `get_stats()` returns a copy of the `Stats` totals.
- `Aggregator.start(cancel=None)` starts the threads and returns at once;
  setting `cancel` or calling `stop()` ends them.

## What it does not do

- There is no pause between rounds: each worker checks every URL, then starts
  again at once. `check_interval` is read but nothing acts on it.
- The console "SLOW" line and `Stats.slow_count` use a fixed one-second limit;
  `slow_threshold` only sets `Result.is_slow`.
- `Stats.average_latency` is never updated and stays 0.
- Results are not stored anywhere and no alerts are sent; everything goes to
  the console.