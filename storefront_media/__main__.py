import sys

from storefront_media.cli import main

sys.exit(main())
