from __future__ import annotations

"""
Shared constants for the lambda search and the command line defaults.
"""

# Candidate regularization strengths, scanned in this order.
LAMBDAS = (0.0, 0.001, 0.003, 0.01, 0.03, 0.1, 0.3, 1.0, 3.0, 10.0, 30.0, 100.0, 300.0)

# Optimizer iterations spent on each candidate during the scan.
SEARCH_ITERS = 10

DEFAULT_MAX_ITERS = 100

DECISION_THRESHOLD = 0.5
