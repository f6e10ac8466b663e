import unittest
from datetime import datetime

from officetools.domain.errors import ToolInputError
from officetools.domain.speech import (
    SpeechController,
    SpeechParameters,
    render_script,
    render_ssml,
)


class FakeEngine:
    def __init__(self, voices=('Alice', 'Bob')):
        self._voices = list(voices)
        self.spoken = []
        self.cancelled = 0
        self.is_speaking = False
        self.is_paused = False

    def voices(self):
        return self._voices

    def speak(self, utterance):
        self.spoken.append(utterance)
        self.is_speaking = True
        self.is_paused = False

    def cancel(self):
        self.cancelled += 1
        self.is_speaking = False
        self.is_paused = False

    def pause(self):
        self.is_paused = True

    def resume(self):
        self.is_paused = False


class SpeechControllerTests(unittest.TestCase):
    def setUp(self):
        self.engine = FakeEngine()
        self.controller = SpeechController(self.engine)

    def test_speak_uses_requested_voice(self):
        utterance = self.controller.speak('Hello', SpeechParameters(voice='Bob', rate=1.5))
        self.assertEqual(utterance.voice, 'Bob')
        self.assertEqual(utterance.rate, 1.5)
        self.assertEqual(self.engine.spoken, [utterance])
        self.assertIs(self.controller.current, utterance)

    def test_speak_defaults_to_first_voice(self):
        utterance = self.controller.speak('Hello', SpeechParameters())
        self.assertEqual(utterance.voice, 'Alice')

    def test_unknown_voice_falls_back_to_engine_default(self):
        utterance = self.controller.speak('Hello', SpeechParameters(voice='Zed'))
        self.assertIsNone(utterance.voice)

    def test_new_utterance_cancels_previous(self):
        self.controller.speak('One', SpeechParameters())
        self.controller.speak('Two', SpeechParameters())
        self.assertEqual(self.engine.cancelled, 2)
        self.assertEqual(self.controller.current.text, 'Two')

    def test_blank_text_rejected(self):
        with self.assertRaises(ToolInputError):
            self.controller.speak('   ', SpeechParameters())
        self.assertEqual(self.engine.spoken, [])

    def test_out_of_range_rate_rejected(self):
        with self.assertRaisesRegex(ToolInputError, 'Rate must be between 0.1 and 2'):
            self.controller.speak('Hello', SpeechParameters(rate=2.5))

    def test_toggle_pause_and_stop(self):
        self.controller.speak('Hello', SpeechParameters())
        self.controller.toggle_pause()
        self.assertTrue(self.engine.is_paused)
        self.controller.toggle_pause()
        self.assertFalse(self.engine.is_paused)
        self.controller.stop()
        self.assertIsNone(self.controller.current)
        self.assertFalse(self.engine.is_speaking)

    def test_no_voices(self):
        controller = SpeechController(FakeEngine(voices=()))
        self.assertEqual(controller.default_voice(), '')
        self.assertIsNone(controller.speak('Hi', SpeechParameters()).voice)


class ExportTests(unittest.TestCase):
    def test_script_lists_settings(self):
        script = render_script(
            'Read me',
            SpeechParameters(rate=1.5, pitch=0.8, volume=0.8),
            generated_at=datetime(2024, 1, 2, 3, 4, 5),
        )
        self.assertIn('Generated on: 2024-01-02 03:04:05', script)
        self.assertIn('- Voice: Default', script)
        self.assertIn('- Rate: 1.5x', script)
        self.assertIn('- Pitch: 0.8x', script)
        self.assertIn('- Volume: 80%', script)
        self.assertIn('Text Content:\nRead me\n', script)

    def test_script_requires_text(self):
        with self.assertRaisesRegex(ToolInputError, 'Please enter some text to download'):
            render_script('', SpeechParameters())

    def test_ssml_escapes_text(self):
        ssml = render_ssml('a < b & "c"', SpeechParameters(voice='Bob', rate=1.2))
        self.assertIn('<voice name="Bob" rate="1.2" pitch="1" volume="1">', ssml)
        self.assertIn('a &lt; b &amp; "c"', ssml)
        self.assertTrue(ssml.startswith('<?xml version="1.0" encoding="UTF-8"?>'))

    def test_ssml_requires_text(self):
        with self.assertRaisesRegex(ToolInputError, 'Please enter some text first'):
            render_ssml('  ', SpeechParameters())


if __name__ == '__main__':
    unittest.main()
