import sys

from shift_calendar.main import main

sys.exit(main())
