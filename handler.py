"""AWS Lambda entry point for listing enhancement."""

import json

from listing_enhancer.config import Settings, configure_logging
from listing_enhancer.handlers import ENHANCE_PATH, create_app_handler

settings = Settings.from_env()
configure_logging(settings.log_level)

# Listing service is built on the first event
lambda_handler = create_app_handler(settings)


# Local testing
if __name__ == "__main__":
    import sys

    if len(sys.argv) < 2:
        print("Usage: python handler.py <title> [price] [features]")
        print()
        print("Example:")
        print('  python handler.py "Wireless Mouse" 19.99 "2.4GHz, silent clicks"')
        sys.exit(1)

    test_input = {"title": sys.argv[1]}
    if len(sys.argv) > 2:
        test_input["price"] = sys.argv[2]
    if len(sys.argv) > 3:
        test_input["features"] = sys.argv[3]

    print("Running with input:")
    print(json.dumps(test_input, indent=2))
    print()

    event = {
        "rawPath": ENHANCE_PATH,
        "requestContext": {"http": {"method": "POST"}},
        "body": json.dumps(test_input),
    }

    result = lambda_handler(event, None)
    print(f"\nResult ({result['statusCode']}):")
    print(json.dumps(json.loads(result["body"]), indent=2))
