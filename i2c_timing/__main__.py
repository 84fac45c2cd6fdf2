import sys

from i2c_timing.cli import main

sys.exit(main())
