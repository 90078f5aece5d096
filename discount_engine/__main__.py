import sys

from discount_engine.main import main

sys.exit(main())
