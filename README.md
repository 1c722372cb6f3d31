# patternbook

A compact collection of the classic design patterns. Each pattern is a small,
self-contained module with a `demo()` function that plays out an example
scenario. The package is meant for reading, experimenting in a REPL and
studying alongside a textbook. It has no dependencies beyond the standard
library.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## What is inside

Creational patterns

- `patternbook.abstract_factory`: brand factories (`AsusFactory`, `HpFactory`)
  that produce matching computers and monitors. `get_factory(brand)` returns
  the factory for `"asus"` or `"hp"` and raises `UnknownBrandError` for any
  other brand.
- `patternbook.builder`: collectors (`AsusCollector`, `HpCollector`) that
  assemble a `Computer` step by step, directed by a `Factory` through
  `create_computer()`. `get_collector(collector_type)` returns a fresh
  collector, or `None` for an unknown type. `Computer.report()` returns a
  one-line description.
- `patternbook.factory_method`: `create(type_name)` builds a `Server`,
  `Notebook` or `PersonalComputer` from `"server"`, `"notebook"` or
  `"computer"`, and returns `None` for an unknown name.
- `patternbook.singleton`: `new_singleton(item, type_name)` hands back `item`
  when it already exists and creates a new `Singleton` only when `item` is
  `None`.

Structural patterns

- `patternbook.adapter`: `JsonDocumentAdapter` lets a `JsonDocument` take part
  where an `AnalyticalDataService` (such as `XmlDocument`) is expected.
- `patternbook.bridge`: `LinuxPc`, `MacPc` and `WindowsPc` work with any
  `Scanner` (`Epson`, `Hp`) attached through `add_scanner`; `scan()` raises
  `RuntimeError` when no scanner is attached.
- `patternbook.composite`: a tree of components (`Pc`, `Motherboard`, `Cpu`,
  `GraphicsCard`); `search(name)` returns every component in the tree with
  that name.
- `patternbook.decorator`: `HomePc` and `ServerPc` wrap another `Wrapper`
  (such as `BasePc`) and scale its `price()`.
- `patternbook.facade`: `Shop.sell(user, product)` hides the card and bank
  checks behind a single call, returns the names of the products sold and
  raises `InsufficientFundsError` when the card balance is not positive or
  the price is higher than the balance. The card, bank and shop steps each
  pause briefly to stand for slow services.
- `patternbook.proxy`: `ProxyDatabase` passes requests to a `Database` only
  for users marked as allowed and raises `ForbiddenError` otherwise.

Behavioural patterns

- `patternbook.chain`: a `Device`, an `UpdateDataService` and a
  `DataService`, linked with `set_next`, handle a `Data` record in turn;
  `execute(data)` returns the messages of every link that ran.
- `patternbook.iterator`: `Routes` walks a list of `Route` objects, either
  with `has_next()` / `get_next()` or as an ordinary Python iterator.
- `patternbook.mediator`: a `StationManager` lets `Passenger` and `Cargo`
  vehicles share a single platform, queueing those that have to wait.
- `patternbook.observer`: a `Publisher` keeps subscribers keyed by name and
  `notify()` returns the message delivered to each `Subscriber`.
- `patternbook.snapshot`: a `Creator` saves its state into a `Snapshot` with
  `create()` and returns to it with `restore()`; a `Guardian` keeps the
  snapshots in order.
- `patternbook.state`: a `VendingMachine` whose behaviour depends on its
  current `state` (`HasItemState`, `ItemRequestState`, `HasMoneyState`,
  `NoItemState`); actions that are not allowed raise `VendingMachineError`.
- `patternbook.strategy`: a `Navigator` plans a route with a `WalkStrategy`,
  `RoadStrategy` or `PublicTransportStrategy`; `route()` raises
  `RuntimeError` when no strategy is set.

## Using the modules

Every pattern module has a `demo()` function that plays out its example
scenario and returns what it produced, usually a list of message lines:

```python
from patternbook import abstract_factory, decorator, mediator

abstract_factory.demo()
decorator.demo()          # (10.0, 40.0, 30720.0)
mediator.demo(pause=0)    # the mediator demo waits `pause` seconds between steps
```

The pieces can also be used directly:

```python
from patternbook.abstract_factory import UnknownBrandError, get_factory

factory = get_factory("asus")
print(factory.get_computer().print_details())
print(factory.get_monitor().print_details())

try:
    get_factory("Dell")
except UnknownBrandError as error:
    print(error)
```

Messages are also sent to the standard `logging` module at INFO level, under
each module's own logger name.

## Command line

The `patternbook` command runs the demonstrations and prints what each one
produces, under a `== name ==` heading:

```
patternbook                  # run every demonstration
patternbook state strategy   # run only the named ones
patternbook --list           # list the pattern names
patternbook --pause 0 mediator
patternbook -v facade        # also log each step with a timestamp
```

`--pause` sets the seconds the mediator demonstration waits between steps
(default 1.0). An unknown pattern name is reported as a usage error. See all
options with:

```
patternbook --help
```