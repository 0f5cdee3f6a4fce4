import argparse
import asyncio
import json
import logging
import sys
from dataclasses import asdict

from certgen.config import settings
from certgen.services import CertificateGenerationError, CertificateGenerationService

# Configure logging
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format=LOG_FORMAT,
    stream=sys.stderr
)
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate the certificate payload for a test result JSON file."
    )
    parser.add_argument("test_result", help="path to a test result JSON file")
    parser.add_argument("--indent", type=int, default=2)
    return parser.parse_args(argv)


async def main(argv=None) -> int:
    """Main entry point"""
    args = parse_args(argv)

    with open(args.test_result, encoding="utf-8") as f:
        test_result = json.load(f)

    service = CertificateGenerationService.from_settings(settings)
    try:
        generated = await service.generate_payload(test_result)
    except CertificateGenerationError as e:
        logger.error(f"Certificate generation failed: {e}")
        return 1

    result = asdict(generated)
    result["certificate_data"] = generated.certificate_data.value
    print(json.dumps(result, indent=args.indent, ensure_ascii=False))
    return 0


def run():
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
