"""Allow ``python -m near_web3_plugin``."""
from .cli import main

if __name__ == "__main__":
    main()
