"""Example usage of the probkit package.

This example demonstrates the core features of the probkit package including:
- Creating Gamma, Chisquared and Erlang distributions
- Density, CDF and summary statistics
- Sampling from an explicit source and from a SamplingContext
- Querying capabilities with isinstance
"""

import numpy as np

from probkit import (
    Chisquared, Erlang, Gamma,
    InvalidParameter, NumpySource, SamplingContext,
    draw,
)
from probkit.core import Entropy, Median


def gamma_example():
    """Demonstrate the Gamma distribution."""
    print("=" * 60)
    print("Gamma Distribution Example")
    print("=" * 60)

    gamma = Gamma(k=2.0, theta=3.0)
    print(f"\n   {gamma}")
    print(f"   Mean: {gamma.mean():.3f}, Variance: {gamma.variance():.3f}")
    print(f"   Skewness: {gamma.skewness():.4f}, Excess kurtosis: {gamma.kurtosis():.4f}")
    print(f"   Entropy: {gamma.entropy():.4f}")
    print(f"   Modes: {gamma.modes()}")
    print(f"   Density at 3: {gamma.density(3.0):.4f}")
    print(f"   CDF at 3: {gamma.distribution(3.0):.4f}")

    source = NumpySource(seed=7)
    samples = gamma.sample_n(10_000, source)
    print(f"   Sample mean: {samples.mean():.3f}, sample variance: {samples.var():.3f}")

    try:
        Gamma(0, 1.0)
    except InvalidParameter as exc:
        print(f"   Rejected: {exc}")


def derived_distributions_example():
    """Demonstrate Chisquared and Erlang."""
    print("\n" + "=" * 60)
    print("Derived Distributions Example")
    print("=" * 60)

    print("\n1. Chisquared")
    chi2 = Chisquared(4)
    print(f"   {chi2} is {chi2.gamma}")
    print(f"   Density at 2: {chi2.density(2.0):.16f}")
    print(f"   Median (Wilson-Hilferty): {chi2.median():.4f}")

    print("\n2. Erlang")
    erlang = Erlang(5, 0.5)
    print(f"   {erlang} is {erlang.gamma}")
    print(f"   Mean: {erlang.mean()}, Variance: {erlang.variance()}, Modes: {erlang.modes()}")

    print("\n3. Capabilities")
    for dist in (Gamma(2.0, 1.0), chi2, erlang):
        print(
            f"   {dist!r:<28} median: {isinstance(dist, Median)}, "
            f"entropy: {isinstance(dist, Entropy)}"
        )


def context_example():
    """Demonstrate the SamplingContext."""
    print("\n" + "=" * 60)
    print("Sampling Context Example")
    print("=" * 60)

    erlang = Erlang(3, 2.0)
    with SamplingContext(seed=42):
        first = erlang.sample()
    with SamplingContext(seed=42):
        second = erlang.sample()
    print(f"\n   Same seed, same draw: {first == second}")

    with SamplingContext(seed=1):
        result = draw(erlang, 50_000)
    print(f"   {result}")
    print(f"   Expected mean: {erlang.mean():.3f}")


def vectorized_operations_example():
    """Demonstrate vectorized evaluation."""
    print("\n" + "=" * 60)
    print("Vectorized Operations Example")
    print("=" * 60)

    chi2 = Chisquared(3)
    x = np.array([0.5, 1.0, 2.0, 4.0, 8.0])
    print(f"\n   x: {x}")
    print(f"   density(x): {chi2.density(x)}")
    print(f"   distribution(x): {chi2.distribution(x)}")


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("probkit Package Examples")
    print("=" * 60)

    gamma_example()
    derived_distributions_example()
    context_example()
    vectorized_operations_example()

    print("\n" + "=" * 60)
    print("Examples completed successfully!")
    print("=" * 60 + "\n")
