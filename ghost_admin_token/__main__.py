import argparse
import logging
import math
import sys

logger = logging.getLogger(__name__)

_EXIT_BAD_CREDENTIAL = 2


def _unix_time(value: str) -> float:
    try:
        ts = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid unix time: {value!r}")

    if not math.isfinite(ts):
        raise argparse.ArgumentTypeError(f"unix time must be finite: {value!r}")

    return ts


def main() -> None:
    from ghost_admin_token import ENV_VAR, CredentialError, issue, read_credential

    arg_parser = argparse.ArgumentParser(
        description=(
            "Generate a short-lived admin token from an id:secret Admin API key "
            "read from the environment or stdin"
        ),
    )

    arg_parser.add_argument(
        "-e",
        "--env-var",
        default=ENV_VAR,
        help=f"env to read the id:secret key from (default: {ENV_VAR})",
    )
    arg_parser.add_argument(
        "--now",
        type=_unix_time,
        default=None,
        help="unix time to sign the token at (default: current time)",
    )

    arg_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="print debug logs to stderr",
    )

    args = arg_parser.parse_args()

    logging.basicConfig(
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("ghost_admin_token").setLevel(
        logging.DEBUG if args.verbose else logging.WARNING
    )

    credential = read_credential(env_var=args.env_var)

    try:
        token = issue(credential, now=args.now)
    except CredentialError as err:
        logger.error("%s", err)
        sys.exit(_EXIT_BAD_CREDENTIAL)

    sys.stdout.write(token)
    sys.stdout.flush()


if __name__ == "__main__":
    main()
