import unittest as ut

from debug import Debug
from enigma import Enigma


class DebugTest(ut.TestCase):
    def setUp(self):
        self.debug = Debug()
        self.saved = self.debug.status()

    def tearDown(self):
        for name, on in self.saved.items():
            (self.debug.enable if on else self.debug.disable)(name)
        self.debug.toggle_global(True)

    def test_unknown_component(self):
        with self.assertRaises(ValueError):
            self.debug.enable("lampboard")

    def test_switches_are_shared(self):
        Debug().enable("stepping")
        self.assertTrue(self.debug.status()["stepping"])

    def test_status_is_copy(self):
        status = self.debug.status()
        status["rotor"] = not status["rotor"]
        self.assertNotEqual(status, self.debug.status())

    def test_stepping_is_logged(self):
        self.debug.enable("stepping")
        with self.assertLogs("ENIGMA", level="DEBUG") as logs:
            Enigma().encipher_text("a")
        self.assertTrue(any("Rotor pos aab" in line for line in logs.output))

    def test_signal_path_trace(self):
        self.debug.enable("rotor")
        with self.assertLogs("ENIGMA", level="DEBUG") as logs:
            Enigma().encipher_text("a")
        self.assertTrue(any("rotor I fwd: a->e" in line for line in logs.output))

    def test_keyboard_is_logged(self):
        self.debug.enable("keyboard")
        with self.assertLogs("ENIGMA", level="DEBUG") as logs:
            Enigma().encipher_text("A")
        self.assertTrue(any("key A -> 0" in line for line in logs.output))
        self.assertTrue(any("lamp " in line for line in logs.output))

    def test_global_switch(self):
        self.debug.enable("encipher")
        self.debug.toggle_global(False)
        with self.assertNoLogs("ENIGMA", level="DEBUG"):
            Enigma().encipher_text("a")


if __name__ == '__main__':
    ut.main()
