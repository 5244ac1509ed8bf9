"""
Utility script to mint bearer tokens for local development.

The API only verifies tokens; in production they come from the login flow of
the client apps. This signs one with the configured SECRET_KEY so the
authenticated routes can be exercised with curl or an HTTP client.
"""
import argparse
import logging
from datetime import timedelta

from spacetime.auth import create_access_token, decode_access_token

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Issue a JWT for the Spacetime API")
    parser.add_argument("user_id", help="Value of the token's sub claim")
    parser.add_argument("--name", help="Optional display name claim")
    parser.add_argument("--minutes", type=int, help="Token lifetime in minutes")
    parser.add_argument("--header", action="store_true", help="Print as an Authorization header")

    args = parser.parse_args()

    claims = {}
    if args.name:
        claims["name"] = args.name
    expires = timedelta(minutes=args.minutes) if args.minutes else None

    token = create_access_token(args.user_id, expires_delta=expires, **claims)
    payload = decode_access_token(token)
    logger.info(f"Issued token for {payload['sub']} expiring at {payload['exp']}")

    if args.header:
        print(f"Authorization: Bearer {token}")
    else:
        print(token)

if __name__ == "__main__":
    main()
