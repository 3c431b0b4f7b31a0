"""Allow ``python -m resend_repro``."""

from resend_repro.app import main

main()
