"""calcpad — keypad calculator core with a left-to-right evaluator.

Button presses become events, a pure reducer folds them into the input
buffer, and the evaluator reduces the buffer with a running total and no
operator precedence ("2+3*4" is 20).

Usage:
    python -m calcpad eval "2+3*4"     # Evaluate an expression
    python -m calcpad press "12+3="    # Replay key presses
    python -m calcpad keys             # Show the keypad
"""
