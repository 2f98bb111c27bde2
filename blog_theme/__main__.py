import sys

from blog_theme.main import main

sys.exit(main())
