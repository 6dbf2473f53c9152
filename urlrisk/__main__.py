import sys

from urlrisk.cli import main

sys.exit(main())
