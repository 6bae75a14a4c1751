import argparse
import logging

from snake_arcade import SnakeGameApp
from config import CAMERA_ENABLED


def main(argv=None):
    parser = argparse.ArgumentParser(description="Arcade snake")
    parser.add_argument("--camera", action="store_true", default=CAMERA_ENABLED,
                        help="steer with index-finger flicks in front of the webcam")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    SnakeGameApp(camera=args.camera).run()


if __name__ == "__main__":
    main()
