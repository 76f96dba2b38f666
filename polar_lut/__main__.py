import sys

from polar_lut.main import main

sys.exit(main())
