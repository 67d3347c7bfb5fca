"""Business flow layer.

Importing any module from this package triggers dependency registration via
the import below, so CLI/tests don't need to worry about DI initialization
timing.
"""

import src.core.container  # noqa: F401 - Trigger dependency registration
