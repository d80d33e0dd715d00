import sys

from authclient.core.cli import main

sys.exit(main())
