"""
Spectrum analysis of audio windows for the tempo estimators
"""

import numpy as np

from beat_pong.utils.config import tempo_config


def bass_energy(spectrum: np.ndarray, bins: tuple[int, int] | None = None) -> float:
    """Mean level of the bass bins of a byte-scaled spectrum"""
    start, stop = bins or tempo_config.BASS_BINS
    return float(np.mean(spectrum[start:stop]))


class SpectrumAnalyzer:
    """
    Byte-scaled magnitude spectrum with temporal smoothing.

    Each call windows ``fft_size`` mono samples (Blackman window), smooths
    the magnitudes against the previous call and maps decibels between
    ``MIN_DECIBELS`` and ``MAX_DECIBELS`` onto 0-255.
    """

    def __init__(self, fft_size: int | None = None, smoothing: float | None = None):
        self.fft_size = fft_size or tempo_config.FFT_SIZE
        self.smoothing = smoothing if smoothing is not None else tempo_config.ANALYSER_SMOOTHING
        self.window = np.blackman(self.fft_size)
        self.previous = np.zeros(self.fft_size // 2 + 1)

    def reset(self) -> None:
        self.previous = np.zeros(self.fft_size // 2 + 1)

    def byte_spectrum(self, samples: np.ndarray) -> np.ndarray:
        """
        Analyses one window of mono samples in [-1, 1].

        Shorter inputs are zero padded, longer ones truncated.
        """
        frame = np.zeros(self.fft_size)
        samples = np.asarray(samples, dtype=float)[: self.fft_size]
        frame[: len(samples)] = samples

        magnitudes = np.abs(np.fft.rfft(frame * self.window)) / self.fft_size
        self.previous = self.smoothing * self.previous + (1 - self.smoothing) * magnitudes

        with np.errstate(divide="ignore"):
            decibels = 20 * np.log10(self.previous)
        low, high = tempo_config.MIN_DECIBELS, tempo_config.MAX_DECIBELS
        scaled = 255 * (decibels - low) / (high - low)
        return np.clip(np.nan_to_num(scaled, neginf=0.0), 0, 255).astype(np.uint8)

    def energy(self, samples: np.ndarray) -> float:
        return bass_energy(self.byte_spectrum(samples))
