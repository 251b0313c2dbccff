# main.py

import argparse

from aurora_camera.core.application import CameraApplication
from aurora_camera.core.config import Config
from aurora_camera.core.logging import init_logger


def main():
    parser = argparse.ArgumentParser(description="Aurora fly-camera viewer")
    parser.add_argument("--config", default="config.json", help="JSON configuration file")
    parser.add_argument("--model", default="models/environment", help="Panda3D model to display")
    parser.add_argument("--log-dir", default=None, help="Also write DEBUG logs to this directory")
    parser.add_argument("--record", default=None, help="Save the session's key events to this file")
    parser.add_argument("--replay", default=None, help="Replay a recorded session headless and print the final pose")
    args = parser.parse_args()

    config = Config(args.config)
    logger = init_logger(log_dir=args.log_dir, level=config.get('engine.log_level', 'INFO'))
    app = CameraApplication(config)

    if args.replay:
        app.recorder.load_from_file(args.replay)
        frames = app.recorder.replay(app.controller, app.camera)
        logger.info(f"Replayed {frames} frames: {app.camera}")
        return

    if args.record:
        app.recorder.start_recording()
    try:
        app.run(args.model)
    finally:
        if args.record:
            app.recorder.stop_recording()
            app.recorder.save_to_file(args.record)


if __name__ == "__main__":
    main()
