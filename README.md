# patternbook

Small, self-contained demonstrations of classic design patterns. Each
pattern lives in its own module, can be imported and used as a tiny
library, and has a command that prints a short demo.

The classes return the text they produce (a string or a list of strings)
instead of printing it; only each module's `main()` prints.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Patterns

Creational:

- `patternbook.abstract_factory` – `MenuFactory`, `JapaneseMenuFactory`, `AmericanMenuFactory`, dishes and drinks, and `serve_menu(factory)` returning the served lines
- `patternbook.builder` – `Builder`, `HTMLBuilder`, `MarkdownBuilder`, `Document` and `Editor`; `Editor.render()` raises `RuntimeError` before `construct()` has run
- `patternbook.factory_method` – `Factory`, `PS5Factory`, `Switch2Factory`, `Product`
- `patternbook.prototype` – `User.clone()` returns an independent copy
- `patternbook.singleton` – `get_instance()`, `delete_instance()`, `get_singleton_object()`, `Config`

Structural and behavioural:

- `patternbook.decorator` – `Decorator(char, component)` wraps text in one character per layer
- `patternbook.chain_of_responsibility` – `Staff` (up to 50000), `Manager` (up to 500000), `President` (anything); `approve_request(amount)` returns the trail of the request
- `patternbook.command` – `RemoteController` with an undo/redo history of at most 8 commands by default; `press_button()` returns `None` once the history is full
- `patternbook.interpreter` – `Number`, `Add`, `Subtract`, `format_expression`
- `patternbook.iterator` – `Iterable(max_length)`, a bounded collection that is its own iterator; `add()` keeps at most `max_length - 1` items, `assign()` raises `ValueError` when the values do not fit
- `patternbook.mediator` – `ChatRoom` (32 users by default, `RuntimeError` when full) and `User`
- `patternbook.memento` – `Player`, `PlayerMemento`, `Caretaker` (8 mementos by default, `OverflowError` when full, `IndexError` for a missing index)
- `patternbook.observer` – `Publisher`, `Subscriber`, `Event`, `EventType`, `EVENTS`
- `patternbook.state` – `Human` cycling through `StateKind.FINE`, `POISON` and `DEAD`
- `patternbook.strategy` – `Player` acting by its `JobType`
- `patternbook.template_method` – `Recipe`, `RamenRecipe`, `UdonRecipe`, `make_recipe`
- `patternbook.visitor` – `Visitor`, `Person`, `Student`, `Older`, `Younger`

## Using a pattern in code

```python
from patternbook.decorator import Decorator
from patternbook.interpreter import Add, Number, Subtract, format_expression
from patternbook.command import LightOffCommand, LightOnCommand, RemoteController

deco = Decorator("'", Decorator("*", Decorator("+", Decorator(".", None))))
print(deco.decorate("Hello"))          # '*+.Hello.+*'

expr = Subtract(Add(Number(10), Number(6)), Number(8))
print(format_expression(expr), "=", expr.interpret())   # 10 + 6 - 8 = 8

remote = RemoteController(LightOnCommand())
remote.press_button()                  # 'Light ON'
remote.set_command(LightOffCommand())
remote.press_button()                  # 'Light OFF'
remote.undo()                          # 'UNDO: Light Off'
remote.redo()                          # 'REDO: Light OFF'
```

## Running the demos

Every pattern has a command that prints its demonstration:

```
patternbook-decorator
patternbook-abstract-factory
patternbook-builder
patternbook-factory-method
patternbook-prototype
patternbook-singleton
patternbook-state
patternbook-strategy
patternbook-template-method
patternbook-chain-of-responsibility
patternbook-command
patternbook-interpreter
patternbook-iterator
patternbook-mediator
patternbook-memento
patternbook-observer
patternbook-visitor
```

The commands take no options. The iterator and observer demos use random
numbers, so their output differs from run to run.