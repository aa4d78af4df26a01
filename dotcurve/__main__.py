import sys

from dotcurve.main import main

sys.exit(main())
