"""
Print a bcrypt hash usable in users.password.
Run: python -m scripts.hash_password [password]
"""
import sys
import os
import argparse

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cvking.core.config import BCRYPT_ROUNDS, SEED_PASSWORD
from cvking.core.security import hash_password


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Hash a password with bcrypt")
    parser.add_argument("password", nargs="?", default=SEED_PASSWORD)
    parser.add_argument("--rounds", type=int, default=BCRYPT_ROUNDS, help=f"Cost factor (default: {BCRYPT_ROUNDS})")
    args = parser.parse_args(argv)

    print(hash_password(args.password, rounds=args.rounds))
    return 0


if __name__ == "__main__":
    sys.exit(main())
