"""Standard normal density and distribution functions."""

from __future__ import annotations

from scipy.stats import norm

__all__ = ["std_normal_pdf", "std_normal_cdf"]


def std_normal_pdf(x: float) -> float:
    """Standard normal probability density $\\varphi(x) = e^{-x^2/2} / \\sqrt{2\\pi}$.

    Defined for every real ``x`` (including ``±inf``, where it returns 0).
    """
    return float(norm.pdf(x))


def std_normal_cdf(x: float) -> float:
    """Standard normal cumulative distribution $\\Phi(x) = P(Z \\le x)$.

    Evaluated through ``scipy.stats.norm`` (erf-based, accurate far beyond
    1e-7 across the real line). ``cdf(-inf) == 0``, ``cdf(0) == 0.5`` and
    ``cdf(inf) == 1``.
    """
    return float(norm.cdf(x))
