import numpy as np
import sys


def printCellState(time, states, algebraic):
    """
    Print the state and currents of one cell and check for invalid values.
    Terminates the program if any state or current is NaN or infinite.
    """
    print(f"t = {float(time):.4f} ms:", end=" ")
    flag = False

    for record in (states, algebraic):
        for name, value in zip(record._fields, record):
            value = float(np.asarray(value))
            if not np.isfinite(value):
                print(f"\nTerminating program: {name} is NaN or infinite.")
                flag = True

    print(
        f"V: {float(states.V):.4f} m: {float(states.m):.6f} h: {float(states.h):.6f}",
        end=" ",
    )
    print(
        f"i_tot: {float(algebraic.i_tot):.6f} i_Stim: {float(algebraic.i_Stim):.2f}",
        end=" ",
    )

    if flag:
        sys.exit(1)
    print("")


def printRates(rates):
    """Print the time derivatives of one cell."""
    formatted = " ".join(
        f"{name}: {float(value):.6e}" for name, value in zip(rates._fields, rates)
    )
    print("Rates:", formatted)
