import sys
from redmart.cli import main

sys.exit(main())
