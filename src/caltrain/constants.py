import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEBUG_MODE = os.getenv("DEBUG_MODE", "false").lower() == "true"

# File paths
CONFIG_FILE = Path(
    os.getenv(
        "CALTRAIN_CONFIG_FILE",
        str(Path(__file__).parent.parent.parent / "config" / "config.json"),
    )
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Class name suffixes used by the status page markup. Matched against the
# whole class attribute value, not individual tokens.
SUBTABLE_MARKER = "ipf-st-ip-trains-subtable"
TRAIN_ID_MARKER = "ipf-st-ip-trains-subtable-td-id"
TRAIN_TYPE_MARKER = "ipf-st-ip-trains-subtable-td-type"
ARRIVAL_TIME_MARKER = "ipf-st-ip-trains-subtable-td-arrivaltime"

# Subtable order on the page: first block is southbound, second northbound
SOUTHBOUND_TABLE_INDEX = 1
NORTHBOUND_TABLE_INDEX = 2

# Minutes reported when the arrival label has no countdown in it
NO_COUNTDOWN_MINUTES = 9001

MAX_U16 = 65535
