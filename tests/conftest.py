"""Root conftest — shared test configuration."""

import os

# Tests build gates explicitly; a developer's shell toggles must not leak into Settings()
for _key in ("AUTOMOD_ALLOW_API", "AUTOMOD_ALLOW_BRUTE_FORCE", "AUTOMOD_LOG_FORMAT"):
    os.environ.pop(_key, None)
