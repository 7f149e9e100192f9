"""Module entrypoint.

Allows:
    python -m eternus_advcopy_check -H <hostname> -U <username> -P <password>
"""

from __future__ import annotations

from eternus_advcopy_check.cli import main

if __name__ == "__main__":
    main()
