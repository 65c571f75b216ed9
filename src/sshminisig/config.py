import logging
import os
from dotenv import load_dotenv

load_dotenv()

# Logger level for the "sshminisig" logger (stderr); unknown names fall back to WARNING
LOG_LEVEL = os.getenv("SSHMINISIG_LOG_LEVEL", "WARNING").upper()
if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    LOG_LEVEL = "WARNING"

# CLI: terminate the printed token with "\n" (raw token by default, like the Go tool)
TRAILING_NEWLINE = os.getenv("SSHMINISIG_TRAILING_NEWLINE", "false").lower() == "true"
