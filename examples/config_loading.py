"""config_loading.py"""

import sys

from cliroute.config import loader

app = loader("cliroute.yaml")

if __name__ == "__main__":
    sys.exit(app.run())
