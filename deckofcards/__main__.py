import sys

from deckofcards.main import main

sys.exit(main())
