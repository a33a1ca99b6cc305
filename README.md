# ergo

ergo is a small term language. It comes with an evaluator, a zipper for moving a focus through a term, and a full-screen terminal viewer that highlights the focused part of a term.

## The term language

`ergo.term` defines six frozen dataclasses:

| Node | Fields | Meaning |
|------|--------|---------|
| `Id` | `name` | a variable reference |
| `Abstract` | `name`, `body` | binds `name` in `body`, shown as `(x: body)` |
| `Let` | `value`, `cont` | feeds `value` to what `cont` evaluates to, shown as `value: cont` |
| `I` | `value` | an integer |
| `Pair` | `first`, `second` | shown as `(a, b)` |
| `If` | `branches` | a tuple of branches, each a pair of an integer tag and a continuation |

Each node has a constructor function: `ident`, `abstract`, `let`, `i` and `pair`. There is also `tag(index)`, which builds `(x: (index, x))` for making tagged values.

```python
from ergo.term import ident, abstract, let, i
from ergo.evaluator import evaluate

program = let(i(69), abstract("x", ident("x")))
print(evaluate({}, program))   # I(value=69)
```

### Evaluation

`ergo.evaluator.evaluate(ctx, term)` takes a mutable dictionary of name bindings. A call to an abstraction writes the argument into that dictionary. If the callee is an `If`, the value must be a pair whose first element is an `I`. The branch whose tag equals that integer is then called with the pair's second element.

On failure it raises `EvalError`. The error's `kind` is an `ErrorKind` member, and its `name` holds the identifier when one is unbound. Evaluation fails when:

- a variable is unbound (`ID`);
- a value passed to an `If` is not a pair (`CALL_IF_VALUE_PAIR`);
- a value passed to an `If` does not start with an integer (`CALL_IF_VALUE_PAIR_FIRST_I`);
- no branch has a matching tag (`CALL_IF_BRANCH_MISSING`);
- a `Let` continues into something that is neither an abstraction nor an `If` (`CALL_WRONG`).

## The editor

Start it with:

```
ergo
```

The editor opens on the sample program `69: (x: x)`. The focused part of the term is drawn on a purple background, and messages appear on the `Output:` line at the bottom of the screen.

### Navigation mode

| Key | Action |
|-----|--------|
| `h` | move to the previous sibling |
| `j` | move down into the last child |
| `k` | move up to the parent |
| `l` | move to the next sibling |
| `:` | switch to command mode |
| `Ctrl-C` | quit |

When a move is not possible, the output line says so, for example `cannot go up`.

### Command mode

Type a command and press Enter:

- `up`, `down`, `left` or `right` moves the focus.
- `quit` leaves the editor.

Backspace deletes the last character, and Esc returns to navigation mode. Input that is not exactly a command is echoed on the output line.

### What the editor does not do

The editor only navigates. It cannot change the term, load or save a file, or evaluate the term. `ergo.command.parse_syntax_item` parses integers, `+` and `*`, but nothing in the editor uses it yet.

## Using the parts from code

- `ergo.command.parse_command(text)` and `parse_migrate(text)` parse a prefix of `text`. They return the remaining text and the result, or raise `ParseError`.
- `ergo.zipper.Zip(term)` has the methods `down`, `up`, `left` and `right`. Each returns `True` if the focus moved.
- `ergo.render.render_term(term)` renders a term as text. `render_zip(zip)` returns the text before the focus, at the focus and after it.
- `ergo.editor.Model` holds the editor state. `key_event`, `char_press`, `migrate` and `apply` can be driven without a terminal, and `run(terminal)` takes a `blessed.Terminal`.