import sys

from drink_tracker.main import main

sys.exit(main())
