"""Procedural sound cues for Sathi Snake: an apple crunch and a crash."""

from __future__ import annotations

import logging
import math
import random
from array import array
from dataclasses import dataclass
from typing import Dict, Tuple

import pygame

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SynthPatch:
    freq: float
    duration_ms: int
    waveform: str = "sine"  # "sine", "square", "sawtooth"
    volume: float = 0.25
    sweep: float = 0.0
    noise: float = 0.0
    release_start: float = 0.5  # fraction of the note before the fade begins
    release_tau: float = 0.3  # fade time constant as a fraction of the note


# A cue is one or more patches, each starting at an offset in ms.
Cue = Tuple[Tuple[int, SynthPatch], ...]

CUES: Dict[str, Cue] = {
    "eat": (
        (
            0,
            SynthPatch(
                freq=520,
                duration_ms=110,
                waveform="square",
                volume=0.9,
                sweep=-260,
                noise=0.7,
                release_start=0.15,
                release_tau=0.25,
            ),
        ),
    ),
    "over": (
        (0, SynthPatch(freq=260, duration_ms=250, waveform="sawtooth", volume=0.3)),
        (120, SynthPatch(freq=180, duration_ms=350, waveform="sawtooth", volume=0.25)),
    ),
}


class AudioEngine:
    """Mixer setup plus fire-and-forget playback of the game cues.

    Any mixer failure disables the engine and is logged; the game keeps
    running silently.
    """

    def __init__(self, muted: bool = False) -> None:
        self.enabled = False
        self.sounds: Dict[str, pygame.mixer.Sound] = {}
        self.sample_rate: int = 22050
        self.channels: int = 1
        if muted:
            logger.info("Audio muted by configuration")
            return
        self._init_audio()

    def _init_audio(self) -> None:
        """Initialise pygame.mixer and synthesise the cues."""

        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=self.sample_rate, size=-16, channels=1)
            mixer_info = pygame.mixer.get_init()
            if mixer_info:
                self.sample_rate, _, self.channels = mixer_info
            self.sounds = {name: self._render_cue(cue) for name, cue in CUES.items()}
        except pygame.error as exc:
            logger.warning("Audio unavailable, continuing without sound: %s", exc)
            self.enabled = False
            self.sounds.clear()
            return
        self.enabled = True

    # --- Synthesis -----------------------------------------------------

    def _render_patch(self, patch: SynthPatch) -> list[float]:
        """Oscillator with a hold-then-exponential-fade envelope."""

        sample_rate = self.sample_rate
        sample_count = max(1, int(sample_rate * patch.duration_ms / 1000))
        duration = patch.duration_ms / 1000
        fade_at = duration * patch.release_start
        tau = max(1e-4, duration * patch.release_tau)
        samples = [0.0] * sample_count

        for idx in range(sample_count):
            t = idx / sample_rate
            freq = patch.freq + patch.sweep * (idx / sample_count)
            cycle_pos = (freq * t) % 1.0
            if patch.waveform == "square":
                wave = 1.0 if cycle_pos < 0.5 else -1.0
            elif patch.waveform == "sawtooth":
                wave = 2.0 * cycle_pos - 1.0
            else:
                wave = math.sin(2.0 * math.pi * cycle_pos)
            if patch.noise > 0.0:
                wave = (1.0 - patch.noise) * wave + patch.noise * (
                    random.random() * 2.0 - 1.0
                )
            env = 1.0 if t < fade_at else math.exp(-(t - fade_at) / tau)
            samples[idx] = wave * env * patch.volume
        return samples

    def _render_cue(self, cue: Cue) -> pygame.mixer.Sound:
        parts = []
        total = 0
        for offset_ms, patch in cue:
            start = int(self.sample_rate * offset_ms / 1000)
            samples = self._render_patch(patch)
            parts.append((start, samples))
            total = max(total, start + len(samples))

        mix = [0.0] * total
        for start, samples in parts:
            for idx, val in enumerate(samples):
                mix[start + idx] += val

        waveform = array("h")
        for val in mix:
            sample = int(max(-32767, min(32767, val * 32767)))
            waveform.extend([sample] * self.channels)
        return pygame.mixer.Sound(buffer=waveform)

    # --- Public API ----------------------------------------------------

    def play(self, name: str) -> None:
        if not self.enabled:
            return
        sound = self.sounds.get(name)
        if sound is None:
            return
        try:
            sound.stop()
            sound.play()
        except pygame.error as exc:
            logger.warning("Could not play %r, disabling audio: %s", name, exc)
            self.enabled = False

    def on_eat(self) -> None:
        self.play("eat")

    def on_game_over(self) -> None:
        self.play("over")
