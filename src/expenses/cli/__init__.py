"""
Command Line Interface Package

The ``expenses`` console script.

Command Structure:
- expenses add AMOUNT MEMO [DATE]: record a new expense
- expenses list: list all expenses
- expenses search QUERY: list expenses with a matching memo
- expenses delete ID: remove one expense
- expenses clear: delete all expenses after a y/N keystroke
- expenses help (or any unknown action): print the command summary
- expenses version / expenses config: utility commands
"""
