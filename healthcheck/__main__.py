import sys

from healthcheck.main import main

sys.exit(main())
