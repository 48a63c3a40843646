import unittest as ut

from rotor_and_reflector import Reflector, Rotor
from utilities import REFLECTOR_NAMES, ROTOR_NAMES, new_reflector, new_rotor
from wiring import ALPHABET


class RotorTest(ut.TestCase):
    def test_translation(self):
        rotor = new_rotor("I")
        self.assertEqual('a', rotor.translate_forward('u'))
        self.assertEqual('e', rotor.translate_forward('a'))
        self.assertEqual('a', rotor.translate_reverse('e'))
        self.assertEqual('m', rotor.translate_reverse('o'))

    def test_translation_is_case_insensitive(self):
        rotor = new_rotor("I")
        self.assertEqual('e', rotor.translate_forward('A'))

    def test_step_changes_translation(self):
        rotor = new_rotor("I")
        self.assertEqual('e', rotor.translate_forward('a'))
        self.assertEqual('k', rotor.translate_forward('b'))
        self.assertEqual('n', rotor.translate_forward('k'))
        self.assertEqual('l', rotor.translate_reverse('t'))
        rotor.step()
        self.assertEqual('j', rotor.translate_forward('a'))

    def test_carry_when_stepping_off_notch(self):
        rotor = new_rotor("I")
        rotor.set('q')
        self.assertTrue(rotor.step())
        self.assertEqual(ALPHABET.index('r'), rotor.position)
        self.assertFalse(rotor.step())

    def test_no_carry_when_landing_on_notch(self):
        rotor = new_rotor("I")
        rotor.set('p')
        self.assertFalse(rotor.step())
        self.assertEqual(ALPHABET.index('q'), rotor.position)

    def test_single_notch_full_revolution(self):
        rotor = new_rotor("III")
        rotor.set('a')
        carries = [i for i in range(26) if rotor.step()]
        self.assertEqual([ALPHABET.index('v')], carries)
        self.assertEqual(0, rotor.position)

    def test_double_notch_full_revolution(self):
        for name in ("VI", "VII", "VIII"):
            rotor = new_rotor(name)
            rotor.set('c')
            carries = sum(rotor.step() for _ in range(26))
            self.assertEqual(2, carries, name)
            self.assertEqual(ALPHABET.index('c'), rotor.position)

    def test_reverse_undoes_forward_at_every_offset(self):
        for name in ROTOR_NAMES:
            rotor = new_rotor(name)
            for offset in ALPHABET:
                rotor.set(offset)
                for c in ALPHABET:
                    self.assertEqual(c, rotor.translate_reverse(rotor.translate_forward(c)))
                    self.assertEqual(c, rotor.translate_forward(rotor.translate_reverse(c)))

    def test_set_rejects_non_letter(self):
        with self.assertRaises(ValueError):
            new_rotor("I").set('3')

    def test_bad_wiring(self):
        with self.assertRaises(ValueError):
            Rotor("ABC", notches="A")

    def test_new_rotor_is_fresh_copy(self):
        first = new_rotor("II")
        first.set('k')
        self.assertEqual(0, new_rotor("II").position)

    def test_unknown_rotor(self):
        with self.assertRaises(KeyError):
            new_rotor("IX")
        with self.assertRaises(KeyError):
            new_rotor("i")

    def test_str(self):
        rotor = new_rotor("IV")
        rotor.set('d')
        self.assertEqual("IV @ d", str(rotor))


class ReflectorTest(ut.TestCase):
    def test_translate(self):
        self.assertEqual('e', new_reflector("A").translate('a'))

    def test_involution_at_every_offset(self):
        for name in REFLECTOR_NAMES:
            reflector = new_reflector(name)
            for offset in ALPHABET:
                reflector.set(offset)
                for c in ALPHABET:
                    self.assertEqual(c, reflector.translate(reflector.translate(c)))

    def test_lowercase_alias(self):
        self.assertEqual("B", new_reflector("b").name)

    def test_rejects_non_involution(self):
        with self.assertRaises(ValueError):
            Reflector("EKMFLGDQVZNTOWYHXUSPAIBRCJ")

    def test_rejects_fixed_point(self):
        with self.assertRaises(ValueError):
            Reflector("ABCDEFGHIJKLMNOPQRSTUVWXYZ")


if __name__ == '__main__':
    ut.main()
