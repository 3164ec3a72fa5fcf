import jax.numpy as jnp
import numpy as np


def compare_values(v1, v2, rtol=1e-12, atol=0.0):
    """
    Recursively compare values that may be scalars, arrays, model records,
    lists, or dicts.
    """
    # Model records (NamedTuple): compare field by field so failures name the field
    if hasattr(v1, "_fields") and hasattr(v2, "_fields"):
        assert v1._fields == v2._fields
        for name, a, b in zip(v1._fields, v1, v2):
            try:
                compare_values(a, b, rtol=rtol, atol=atol)
            except AssertionError as exc:
                raise AssertionError(f"field '{name}' differs: {exc}") from exc
        return

    # Arrays (NumPy or JAX)
    if isinstance(v1, (np.ndarray, jnp.ndarray)) or isinstance(
        v2, (np.ndarray, jnp.ndarray)
    ):
        np.testing.assert_allclose(np.asarray(v1), np.asarray(v2), rtol=rtol, atol=atol)
        return

    # Dicts
    if isinstance(v1, dict) and isinstance(v2, dict):
        assert v1.keys() == v2.keys()
        for k in v1:
            compare_values(v1[k], v2[k], rtol=rtol, atol=atol)
        return

    # Lists
    if isinstance(v1, list) and isinstance(v2, list):
        assert len(v1) == len(v2)
        for a, b in zip(v1, v2):
            compare_values(a, b, rtol=rtol, atol=atol)
        return

    # Scalars
    if isinstance(v1, (float, int)) and isinstance(v2, (float, int)):
        assert np.isclose(v1, v2, rtol=rtol, atol=atol)
    else:
        assert v1 == v2


def records_equal(r1, r2) -> bool:
    """True when two records hold bit-identical values in every field."""
    return r1._fields == r2._fields and all(
        np.array_equal(np.asarray(a), np.asarray(b)) for a, b in zip(r1, r2)
    )
