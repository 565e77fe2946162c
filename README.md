# dockerstats

Think `docker stats`, but with real-time bar charts drawn in your terminal.

`dockerstats` runs `docker stats --format json` in the background, reads
its output as it streams in, and redraws a box for each container about
ten times a second, showing its CPU and memory use as bars. All bars share
one scale (100% or the highest value seen, whichever is larger), so
containers can be compared at a glance. Bars turn from green to yellow to
red as they fill.

## Requirements

- Python 3.10 or later
- The `docker` command on your `PATH` and a running Docker daemon

## Installation

```
pip install dockerstats
```

## Usage

Watch every running container:

```
ds
```

Watch only some containers, by name or ID (the names are passed on to
`docker stats`):

```
ds web db cache
```

Options:

| Option            | Effect                                                   |
|-------------------|----------------------------------------------------------|
| `-c`, `--compact` | Join the containers into one box with dashed separators. |
| `-f`, `--full`    | Also show network and block I/O bars for each container. |

Press `Ctrl+C` to stop.

If no stats arrive for three seconds, the list of containers is cleared
and the screen shows "Waiting for container stats..." until data comes in
again. Lines of output that cannot be decoded are reported as a warning on
standard error and skipped.

### Errors

`ds` exits with status 1 and an error message when:

- the `docker` command cannot be found:
  `Docker command not found. Please install Docker.`
- the Docker daemon cannot be reached, or `docker stats` exits with an error:
  `Docker daemon is not running. Please start Docker.`

## Using it from Python

The building blocks can also be used on their own:

```python
from dockerstats.data import DockerStats
from dockerstats.display import StatsDisplay

stats = DockerStats.from_json(
    '{"BlockIO": "1.2kB / 0B", "CPUPerc": "25.5%", "ID": "abc123",'
    ' "MemPerc": "50.0%", "MemUsage": "512MB / 1GB",'
    ' "Name": "web", "NetIO": "10kB / 5kB"}'
)

display = StatsDisplay(80, compact=False, full=True)
print(display.render([stats]))
```

`StatsDisplay.render` returns one frame as text (with ANSI colour codes);
`StatsDisplay.print_stats` clears the screen and writes it to standard
output. `DockerStats.from_json` and `DockerStats.from_dict` raise
`dockerstats.error.JsonParseError` when a field is missing or not a
string.

`dockerstats.escape.EscapeSequenceCleaner` removes the terminal control
sequences from the raw `docker stats` stream and puts back together JSON
objects that were split across lines. `dockerstats.app.consume_lines`
feeds such lines into a `ContainerTable`, which keeps the latest stats for
each container name. `dockerstats.utils` provides the helpers used to draw
the bars, such as `filler`, `fill_on_even`, `scale_between`,
`usize_to_status` and `parse_byte`.

All errors the monitor raises derive from `dockerstats.error.AppError`.

## Running the tests

```
pip install -e ".[test]"
pytest
```