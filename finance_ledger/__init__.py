"""Console entry point for the finance ledger."""
