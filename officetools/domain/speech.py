"""Text-to-speech settings, playback control and exports.

Playback goes through a :class:`SpeechEngine`, which is whatever synthesizer
the host provides (a browser bridge, an OS voice, or a fake in tests). The
controller keeps at most one utterance queued at a time.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Protocol, Sequence
from xml.sax.saxutils import escape, quoteattr

from officetools.domain.errors import ToolInputError

RATE_RANGE = (0.1, 2.0)
PITCH_RANGE = (0.0, 2.0)
VOLUME_RANGE = (0.0, 1.0)


@dataclass(frozen=True)
class SpeechParameters:
    voice: str = ''
    rate: float = 1.0
    pitch: float = 1.0
    volume: float = 1.0

    def validate(self) -> 'SpeechParameters':
        for name, value, (low, high) in (
            ('rate', self.rate, RATE_RANGE),
            ('pitch', self.pitch, PITCH_RANGE),
            ('volume', self.volume, VOLUME_RANGE),
        ):
            if not low <= value <= high:
                raise ToolInputError(f'{name.capitalize()} must be between {low:g} and {high:g}')
        return self


@dataclass(frozen=True)
class Utterance:
    text: str
    voice: Optional[str]
    rate: float
    pitch: float
    volume: float


class SpeechEngine(Protocol):
    def voices(self) -> Sequence[str]: ...

    def speak(self, utterance: Utterance) -> None: ...

    def cancel(self) -> None: ...

    def pause(self) -> None: ...

    def resume(self) -> None: ...

    @property
    def is_speaking(self) -> bool: ...

    @property
    def is_paused(self) -> bool: ...


class SpeechController:
    def __init__(self, engine: SpeechEngine):
        self._engine = engine
        self.current: Optional[Utterance] = None

    def available_voices(self) -> List[str]:
        return list(self._engine.voices())

    def default_voice(self) -> str:
        voices = self.available_voices()
        return voices[0] if voices else ''

    def speak(self, text: str, params: SpeechParameters) -> Utterance:
        if not (text or '').strip():
            raise ToolInputError('Please enter some text to speak')
        params.validate()

        self._engine.cancel()

        voice = params.voice or self.default_voice()
        if voice not in self.available_voices():
            # Unknown names fall back to the engine's own default voice.
            voice = None

        utterance = Utterance(
            text=text,
            voice=voice,
            rate=params.rate,
            pitch=params.pitch,
            volume=params.volume,
        )
        self._engine.speak(utterance)
        self.current = utterance
        return utterance

    def stop(self) -> None:
        self._engine.cancel()
        self.current = None

    def toggle_pause(self) -> None:
        if self._engine.is_speaking and not self._engine.is_paused:
            self._engine.pause()
        elif self._engine.is_paused:
            self._engine.resume()


def _require_text(text: str, message: str) -> str:
    if not (text or '').strip():
        raise ToolInputError(message)
    return text


def render_script(text: str, params: SpeechParameters, generated_at: Optional[datetime] = None) -> str:
    """Plain-text script describing the voice settings, for reuse in other TTS apps."""
    _require_text(text, 'Please enter some text to download')
    params.validate()
    generated_at = generated_at or datetime.now()

    return (
        'Text-to-Speech Script\n'
        f'Generated on: {generated_at.strftime("%Y-%m-%d %H:%M:%S")}\n'
        '\n'
        'Voice Settings:\n'
        f'- Voice: {params.voice or "Default"}\n'
        f'- Rate: {params.rate:g}x\n'
        f'- Pitch: {params.pitch:g}x\n'
        f'- Volume: {round(params.volume * 100)}%\n'
        '\n'
        'Text Content:\n'
        f'{text}\n'
        '\n'
        'Instructions:\n'
        'This script can be used to reproduce the text-to-speech settings.\n'
        'Copy the text content and apply the voice settings in any TTS application.\n'
    )


def render_ssml(text: str, params: SpeechParameters, lang: str = 'en-US') -> str:
    _require_text(text, 'Please enter some text first')
    params.validate()

    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<speak version="1.0" xmlns="http://www.w3.org/2001/10/synthesis" xml:lang={quoteattr(lang)}>\n'
        f'  <voice name={quoteattr(params.voice or "default")} rate="{params.rate:g}" '
        f'pitch="{params.pitch:g}" volume="{params.volume:g}">\n'
        f'    {escape(text)}\n'
        '  </voice>\n'
        '</speak>'
    )
