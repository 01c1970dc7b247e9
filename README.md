# patternkit

Small, self-contained demonstrations of classic object-oriented design
patterns. Each pattern lives in its own module. You can run a module from the
command line or use its classes directly from Python. Most methods print what
they do and also return that text, so you can use them in code and in tests.

| Module                        | Pattern                                                  |
|-------------------------------|----------------------------------------------------------|
| `patternkit.adapter`          | Adapter: a `WildTurkey` used through `TurkeyAdapter` as a `Duck` |
| `patternkit.command`          | Command: a `RemoteControl` switching a `Light`           |
| `patternkit.decorator`        | Decorator: `Espresso` or `DarkRoast` wrapped in `MilkDecorator` |
| `patternkit.facade`           | Facade: `HomeTheaterFacade` driving amplifier, player and popcorn popper |
| `patternkit.observer`         | Observer: `WeatherData` notifying weather displays       |
| `patternkit.strategy`         | Strategy: ducks with exchangeable fly and quack behaviours |
| `patternkit.sorting`          | `insertion_sort` over `Comparable` objects (`Duck`, `IntValue`) |
| `patternkit.template_method`  | Template method: preparing `Tea` and `Coffee`            |
| `patternkit.mvc`              | Model–view–controller: `BeatModel`, `BeatController`, console `DJView` |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

The `patternkit` command takes the name of one demonstration:

```
patternkit adapter
patternkit command
patternkit decorator
patternkit decorator-if
patternkit facade
patternkit observer
patternkit strategy
patternkit template-method
patternkit sort
patternkit mvc
```

`patternkit --help` lists the choices. `decorator-if` runs the same
demonstration as `decorator`.

Three of the demonstrations read from standard input and stop when the input
ends:

- `observer` reads single characters. `m` or `M` takes a new measurement.
  The temperature starts at 0 and the humidity at 20, and both go up by one
  after each measurement. `T` and `t` unregister and register the third-party
  display. `C` and `c` do the same for the current-conditions display. Every
  other character is ignored.
- `template-method` prepares a tea and then a coffee. Each one asks for a
  `y` or an `n` to decide whether condiments are added.
- `mvc` shows a numbered menu. 1 sets the BPM, 2 raises it by one, 3 lowers
  it by one, 4 starts the beat and 5 stops it. While the beat is running, it
  is printed once a second from a background thread. The beat is switched off
  when the input ends.

## Using the modules

The command pattern:

```python
from patternkit.command import Light, LightOnCommand, LightOffCommand, RemoteControl

light = Light()
remote = RemoteControl()
remote.set_command(LightOnCommand(light), LightOffCommand(light))

remote.switch_light_on()   # prints and returns "Lihgt ist ON!"
remote.switch_light_off()  # prints and returns "Lihgt ist OFF!"
```

If you press a button on a `RemoteControl` before any commands are set, it
raises `RuntimeError`.

The decorator pattern. Prices are `Decimal` values:

```python
from patternkit.decorator import Espresso, MilkDecorator

coffee = MilkDecorator(Espresso())
coffee.description()  # "Espresso, Milk"
coffee.cost()         # Decimal("2.09")
```

Sorting comparable objects in place:

```python
from patternkit.sorting import Duck, insertion_sort

ducks = [Duck("a", 4), Duck("b", 2), Duck("c", 44), Duck("d", 1)]
insertion_sort(ducks)
[d.weight for d in ducks]  # [1, 2, 4, 44]
```

The sort is stable. Comparing objects of different kinds raises `TypeError`.

The interactive parts take any text stream, so you can script them:

```python
import io
from patternkit import observer, template_method

observer.run(io.StringIO("mTm"))
template_method.run(io.StringIO("yn"))
```

`template_method.read_answer` raises `EOFError` if the stream ends before a
`y` or an `n` appears.

Each module has a `run` function that plays through the same scenario as its
command-line demonstration.

## What it does not do

- The MVC demonstration runs only on the console. There is no graphical
  window, buttons or progress bar.
- The beat is only printed. No sound is played.