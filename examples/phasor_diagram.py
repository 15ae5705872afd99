"""
Phasor diagram of an RL-load connected to an AC voltage source.
"""

import matplotlib.pyplot as plt

from phasordiagram import ureg, j, phasor


def main() -> None:
    # --------------------------------------------------------------------------
    # Solve circuit
    # --------------------------------------------------------------------------
    V = ureg.volt
    Ohm = ureg.ohm

    V1 = 100 * V + j * 0 * V  # source voltage
    Z1 = 30 * Ohm + j * 40 * Ohm  # load impedance
    I1 = V1 / Z1
    Vr = Z1.real * I1  # voltage across resistance
    Vx = V1 - Vr  # voltage across reactance

    refV = abs(V1)
    refI = 0.8 * abs(I1)

    # --------------------------------------------------------------------------
    # Draw phasor diagram
    # --------------------------------------------------------------------------
    plt.figure(figsize=(3.3, 2.5))
    phasor(V1, ref=refV, label="$\\underline{V}_1$", tlabel=-0.1, relrot=True)
    phasor(Vr, ref=refV, label="$\\underline{V}_r$", tlabel=-0.1, relrot=True)
    phasor(
        Vx, origin=Vr, ref=refV,
        label="$\\underline{V}_x$", tlabel=0.15, relrot=True
    )
    phasor(
        I1, ref=refI,
        label="$\\underline{I}_1$", tlabel=0.2, rlabel=0.7, relrot=True,
        linestyle="--", par=0.05
    )
    plt.axis("square")
    plt.xlim(-1, 1)
    plt.ylim(-1, 1)
    plt.gca().set_axis_off()
    plt.show()


if __name__ == "__main__":
    main()
