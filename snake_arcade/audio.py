import logging

import numpy as np
import pygame

logger = logging.getLogger(__name__)


def make_tone(freq=440, duration=0.12, volume=0.2, end_freq=None, sample_rate=44100):
    """Generate a pygame Sound with a sine tone, optionally sweeping to ``end_freq``."""
    n = max(1, int(sample_rate * duration))
    t = np.linspace(0, duration, n, False)
    if end_freq is None:
        phase = 2 * np.pi * freq * t
    else:
        # linear chirp
        sweep = (end_freq - freq) / (2 * duration)
        phase = 2 * np.pi * (freq * t + sweep * t * t)
    wave = volume * np.sin(phase)
    # Apply quick envelope
    env = np.ones_like(wave)
    attack = min(n, int(0.01 * sample_rate))
    release = min(n, int(0.03 * sample_rate))
    if attack:
        env[:attack] = np.linspace(0, 1, attack)
    if release:
        env[-release:] *= np.linspace(1, 0, release)
    wave = (wave * env * (2**15 - 1)).astype(np.int16)
    stereo = np.ascontiguousarray(np.column_stack([wave, wave]))
    return pygame.sndarray.make_sound(stereo)


class SoundBank:
    """Game sound effects; silent when the mixer cannot be opened."""

    def __init__(self):
        self.muted = False
        self.sounds = {}
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=44100, size=-16, channels=2)
            self.sounds = {
                "start": make_tone(freq=880, duration=0.12, volume=0.25),
                "eat": make_tone(freq=720, duration=0.10, volume=0.22, end_freq=520),
                "die": make_tone(freq=420, duration=0.40, volume=0.30, end_freq=110),
                "click": make_tone(freq=560, duration=0.04, volume=0.15),
            }
        except (pygame.error, ValueError) as exc:
            logger.warning("Sound disabled: %s", exc)
            self.sounds = {}

    def toggle_mute(self):
        self.muted = not self.muted
        return self.muted

    def play(self, name):
        if self.muted or name not in self.sounds:
            return
        self.sounds[name].play()
