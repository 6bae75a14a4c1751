import logging
import math
import threading
import time

import cv2
import mediapipe as mp

from config import *

logger = logging.getLogger(__name__)


class HandTracker:
    """Index finger tracking with MediaPipe."""

    def __init__(self):
        self.mp_hands = mp.solutions.hands
        self.mp_drawing = mp.solutions.drawing_utils
        self.mp_drawing_styles = mp.solutions.drawing_styles
        self.hands = self.mp_hands.Hands(
            static_image_mode=False,
            max_num_hands=1,
            min_detection_confidence=0.5,
            min_tracking_confidence=0.5,
            model_complexity=1
        )
        self.prev_position = None

    def find_finger_position(self, frame):
        """Return (fingertip position or None, annotated frame)."""
        frame_rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        results = self.hands.process(frame_rgb)

        if not results.multi_hand_landmarks:
            self.prev_position = None
            return None, frame

        hand_landmarks = results.multi_hand_landmarks[0]
        self.mp_drawing.draw_landmarks(
            frame,
            hand_landmarks,
            self.mp_hands.HAND_CONNECTIONS,
            self.mp_drawing_styles.get_default_hand_landmarks_style(),
            self.mp_drawing_styles.get_default_hand_connections_style()
        )

        index_finger = hand_landmarks.landmark[8]
        h, w, _ = frame.shape
        new_pos = (int(index_finger.x * w), int(index_finger.y * h))
        cv2.circle(frame, new_pos, 10, (0, 255, 0), -1)

        # Ignore single-frame jumps, they are almost always misdetections
        if self.prev_position is not None:
            dist = math.hypot(new_pos[0] - self.prev_position[0],
                              new_pos[1] - self.prev_position[1])
            if dist > TRACKER_MAX_JUMP:
                return self.prev_position, frame

        self.prev_position = new_pos
        return new_pos, frame

    def close(self):
        self.hands.close()


def map_to_board(camera_pos, mirror=CAMERA_MIRROR):
    """Map camera coordinates to board pixel coordinates."""
    x, y = camera_pos
    if mirror:
        x = CAMERA_WIDTH - x
    return (int(x * BOARD_PX / CAMERA_WIDTH), int(y * BOARD_PX / CAMERA_HEIGHT))


class FingerCamera:
    """Runs camera capture and hand tracking on a background thread.

    The thread only publishes the latest fingertip position and preview frame;
    the game reads them with ``latest()`` from the main loop.
    """

    def __init__(self, device=0):
        self.cap = cv2.VideoCapture(device)
        if not self.cap.isOpened():
            self.cap.release()
            raise RuntimeError(f"could not open camera {device}")
        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, CAMERA_WIDTH)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, CAMERA_HEIGHT)
        self.cap.set(cv2.CAP_PROP_FPS, 30)
        logger.info("Camera %s opened", device)
        self.tracker = HandTracker()

        self.frame_lock = threading.Lock()
        self.finger_pos = None
        self.preview = None
        self.running = False
        self.thread = None

    def start(self):
        self.running = True
        self.thread = threading.Thread(target=self.camera_loop, daemon=True)
        self.thread.start()

    def camera_loop(self):
        while self.running:
            ret, frame = self.cap.read()
            if not ret:
                time.sleep(0.01)
                continue

            finger_pos, processed = self.tracker.find_finger_position(frame)
            board_pos = map_to_board(finger_pos) if finger_pos is not None else None

            if CAMERA_MIRROR:
                processed = cv2.flip(processed, 1)
            preview = cv2.cvtColor(cv2.resize(processed, CAMERA_PREVIEW_SIZE), cv2.COLOR_BGR2RGB)

            with self.frame_lock:
                self.finger_pos = board_pos
                self.preview = preview

            time.sleep(0.01)

    def latest(self):
        """Return (finger position in board px or None, RGB preview or None)."""
        with self.frame_lock:
            preview = self.preview.copy() if self.preview is not None else None
            return self.finger_pos, preview

    def stop(self):
        self.running = False
        logger.debug("Stopping camera thread")
        if self.thread is not None and self.thread.is_alive():
            self.thread.join(timeout=1.0)
        self.cap.release()
        self.tracker.close()
