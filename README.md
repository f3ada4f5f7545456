# complab

A set of small, self-contained tools covering the classic stages of a
compiler-construction course: a lexical analyser, two parsers, FIRST and
FOLLOW set computation, finite-automaton conversions, intermediate code
generation, constant propagation and a toy target-code generator.

Each tool is a module that can be used from Python and also run as a
command. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command               | Module                  | Input | What it does |
|-----------------------|-------------------------|-------|--------------|
| `complab-lex`         | `complab.lexer`         | a file given as argument, or standard input | Prints each number, keyword (`int char float if else for`), identifier and special character, then the number of lines |
| `complab-recdesc`     | `complab.recdesc`       | first word of standard input | Says whether it is valid for `E -> TE'`, `E' -> +TE' / ε`, `T -> FT'`, `T' -> *FT' / ε`, `F -> (E) / a` |
| `complab-shiftreduce` | `complab.shiftreduce`   | first word of standard input | Prints the stack table of a shift-reduce parse for `E -> E+E / E/E / E*E / a / b`; exits with 0 on accept, 1 on reject |
| `complab-firstfollow` | `complab.firstfollow`   | none | Prints the FIRST and FOLLOW sets of the built-in grammar `E->TX`, `X->+TX / i`, `T->FY`, `Y->*FY / i`, `F->(E) / i` |
| `complab-infix`       | `complab.infix`         | first word of standard input, e.g. `x=a+b*c` | Prints the postfix form of the right-hand side and its three-address code |
| `complab-constprop`   | `complab.constprop`     | a count, then that many quadruples `op op1 op2 res` | Folds constant quadruples, substitutes their values into later ones and prints what remains |
| `complab-codegen`     | `complab.codegen`       | statements such as `a=b+c`, ended by `exit` | Prints `Mov`/`ADD`/`SUB`/`MUL`/`DIV` register instructions, one register per statement |
| `complab-closure`     | `complab.closure`       | a transition file (argument, default `input.dat`) and, on standard input, a count followed by that many states | Prints the chain of ε-moves followed from each state |
| `complab-enfa`        | `complab.enfa`          | see below | Converts an ε-NFA into an equivalent NFA without ε-moves |
| `complab-subset`      | `complab.subset`        | see below | Builds a DFA by subset construction and runs up to three strings through it |

For example:

```
echo "a+a*a" | complab-recdesc
echo "x=a+b*c" | complab-infix
complab-firstfollow
```

### Input of `complab-enfa`

Whitespace-separated, in this order: the number of alphabet symbols, the
symbols (use `e` for epsilon), the number of states, the start state, the
number of final states, the final states, the number of transitions, and each
transition as `source symbol target`. States are numbered from 1.

### Input of `complab-subset`

Whitespace-separated, in this order: the number of NFA states, the number of
final states, the final states, the number of rules, each rule as
`source symbol target` (symbol `0` means input 0, anything else input 1), the
initial state, and then up to three strings of `0` and `1`. States are
numbered from 0; a DFA state is printed as the bit mask of the NFA states it
holds.

## Library use

```python
from complab.lexer import tokenize, count_lines
from complab.recdesc import is_valid
from complab.infix import to_postfix, three_address, translate
from complab.firstfollow import Grammar, default_grammar

for token in tokenize("int x1 = 42;"):
    print(token.kind, token.text)   # spaces come back as TokenKind.SPACE
print(count_lines("a\nb\n"))        # 2

print(is_valid("a+a*a"))   # True
print(is_valid("a+"))      # False

print(translate("x=a+b*c"))
# ('abc*+', ['t0=b*c', 't1=a+t0', 'x=t1'])

grammar = default_grammar()
print(grammar.first("E"))    # ('(', 'i')
print(grammar.follow("E"))
```

`Grammar` takes any productions given as `(lhs, rhs)` pairs of
single-character symbols, a set of terminals, a start symbol and an epsilon
symbol (`!` by default).

Other modules:

- `complab.shiftreduce.parse(text)` returns a list of `Step(stack, remaining,
  action)`; the last action is `ACCEPT` or `reject`.
- `complab.constprop.parse_quads(text)` reads quadruples into `Quad` objects and
  `propagate(quads)` returns the ones left after folding.
- `complab.codegen.generate(instructions)` returns the target instructions and
  raises `ValueError` for a malformed statement or unknown operator.
- `complab.closure.parse_transitions(text)` and
  `chain_closure(transitions, state)` follow ε-moves in one pass over the table.
- `complab.enfa.EpsilonNFA` collects moves with `add_transition`, reports
  ε-closures with `closure`, and produces an `NFA` through `remove_epsilon`.
- `complab.subset.build_dfa(num_states, rules)` returns a `SubsetDFA` whose
  `run` method gives the path a string takes and whose `accepts` method tells
  whether it ends in a state holding a final NFA state.

## Limits

The tools are teaching-sized. Operands and symbols are single characters, the
`complab-firstfollow` command only reports on its built-in grammar (other
grammars are available through `Grammar` in Python), and the subset
construction handles only the alphabet `{0, 1}`.