"""Allow ``python -m yba_ctl``."""

from yba_ctl.main import run

if __name__ == "__main__":
    run()
