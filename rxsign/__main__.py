# rxsign/__main__.py
import sys
from rxsign.demo import main

sys.exit(main())
