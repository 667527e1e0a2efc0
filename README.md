# consoleplay

A handful of small interactive console programs and the building blocks
behind them:

- **Rock, paper, scissors** against the computer over a chosen number of
  rounds, with a final scoreboard.
- **Math quiz** with a chosen number of questions, level (easy, medium,
  hard or mix) and operation (add, sub, mul, div or mix).
- **ATM simulator** working on a plain-text file of client accounts: log in
  with an account number and PIN, then make a quick withdrawal, a custom
  withdrawal in multiples of 5, a deposit, or check the balance.
- A **stack** and a growable **vector**, each with a small demonstration.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Commands

```
consoleplay-rps                  # rock, paper, scissors
consoleplay-mathgame             # math quiz
consoleplay-atm [clients_file]   # ATM simulator (default file: Clients.txt)
consoleplay-stack                # stack demonstration
consoleplay-vector               # vector demonstration
```

Both games ask whether to play again after each game; any answer not
starting with `y` or `Y` ends them. End of input or Ctrl-C also quits.

### The ATM clients file

Each line of the clients file holds one account, with its fields separated
by `#//#`:

```
AccountNumber#//#PinCode#//#Name#//#Phone#//#AccountBalance
```

for example:

```
A100#//#1234#//#Jane Doe#//#none#//#5000
```

Balances are written back to the same file after each transaction. A
withdrawal is allowed only when the amount is strictly less than the
current balance. Quick withdrawal offers 20, 50, 100, 200, 400, 600, 800
and 1000. Choosing Logout returns to the login screen; choosing a menu
number outside 1–5, or running out of input, ends the program.

## Using the pieces from Python

```python
from consoleplay.stack import Stack

s = Stack()
for value in (10, 20, 30):
    s.push(value)
top = s.pop()        # 30
print(s.peek())      # 20
print(len(s))        # 2
print(s.display())   # Items in stack: [ 20 10 ]
```

`pop` and `peek` raise `IndexError` on an empty stack.

```python
from consoleplay.vector import Vector

v = Vector()
for value in (2, 10, 5, 3):
    v.push_back(value)
v.pop_front()
print(v.front(), len(v), v.capacity())   # 10.0 3 4
```

The vector stores floats, starts with a capacity of 4 and doubles it when
full; `resize(size, fill)` sets both size and capacity. Indexing,
`front`, `back`, `insert` and `erase` raise `IndexError` when out of range.

```python
from consoleplay.rps import Choice, decide

print(decide(Choice.ROCK, Choice.SCISSORS))   # Outcome.USER_WIN
```

```python
from consoleplay.mathgame import Operation, calculate

print(calculate(7, 3, Operation.MUL))   # 21
print(calculate(7, 2, Operation.DIV))   # 3 (integer division)
```

```python
from consoleplay.atm import ClientStore, Session

store = ClientStore("Clients.txt")
client = store.authenticate("A100", "1234")
if client is not None:
    session = Session(store, client)
    session.deposit(100)
    session.withdraw(50)   # raises InsufficientBalanceError if not below balance
    print(session.balance())
```

The games are driven by `play(read, write, rng)` in `consoleplay.rps` and
`consoleplay.mathgame`, and the ATM by `run(store, read, write)` in
`consoleplay.atm`, so any input source, output sink and random generator
(anything with `randint`) can be plugged in.

## What it does not do

The programs write plain text only: they do not clear the screen, change
console colours or wait for a single key press; "press any key" prompts
wait for a line of input instead.