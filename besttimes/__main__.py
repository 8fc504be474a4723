import sys

from besttimes.launch import main

sys.exit(main())
