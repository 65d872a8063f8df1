import sys

from wcpe.main import main

sys.exit(main())
