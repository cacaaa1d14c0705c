"""Allow running as `python -m render_deploy`"""

from .cli.main import main

if __name__ == "__main__":
    main()
