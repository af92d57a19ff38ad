"""Public smoke tests for basic module wiring.

Keep these minimal and free of any real-world data.
"""

from __future__ import annotations


def test_imports() -> None:
    import grinvoice
    import grinvoice.application.invoices
    import grinvoice.cli.main
    import grinvoice.domain
    import grinvoice.invoice
    import grinvoice.runtime

    assert grinvoice is not None
    assert grinvoice.application.invoices is not None
    assert grinvoice.cli.main is not None
    assert grinvoice.domain is not None
    assert grinvoice.invoice is not None
    assert grinvoice.runtime is not None
