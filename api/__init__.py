"""HTTP front end for the finance ledger."""
