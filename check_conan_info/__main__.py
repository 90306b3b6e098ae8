"""Allow ``python -m check_conan_info``."""

import sys

from check_conan_info.cli.main import main

sys.exit(main())
