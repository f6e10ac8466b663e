import unittest

from officetools.domain.bmi import (
    BMIInput,
    NORMAL,
    OBESE,
    OVERWEIGHT,
    UNDERWEIGHT,
    calculate_bmi,
    classify,
    progress,
    to_meters,
)
from officetools.domain.errors import ToolInputError


class BMICalculatorTests(unittest.TestCase):
    def test_metric_example(self):
        result = calculate_bmi(BMIInput(weight=70, height=175))
        self.assertAlmostEqual(result.bmi, 22.857, places=3)
        self.assertEqual(result.to_dict()['bmi'], 22.9)
        self.assertEqual(result.category, NORMAL)

    def test_imperial_example(self):
        result = calculate_bmi(BMIInput(weight=154, height=68, weight_unit='lb', height_unit='in'))
        self.assertEqual(round(result.bmi, 1), 23.4)
        self.assertEqual(result.category, NORMAL)

    def test_meters_and_centimeters_agree(self):
        cm = calculate_bmi(BMIInput(weight=80, height=180, height_unit='cm'))
        m = calculate_bmi(BMIInput(weight=80, height=1.8, height_unit='m'))
        self.assertAlmostEqual(cm.bmi, m.bmi, places=9)

    def test_feet_conversion(self):
        self.assertAlmostEqual(to_meters(6, 'ft'), 1.8288)

    def test_category_boundaries_are_lower_inclusive(self):
        self.assertEqual(classify(18.49), UNDERWEIGHT)
        self.assertEqual(classify(18.5), NORMAL)
        self.assertEqual(classify(24.999), NORMAL)
        self.assertEqual(classify(25.0), OVERWEIGHT)
        self.assertEqual(classify(29.99), OVERWEIGHT)
        self.assertEqual(classify(30.0), OBESE)

    def test_progress_bands(self):
        self.assertEqual(progress(0), 0.0)
        self.assertAlmostEqual(progress(9.25), 12.5)
        self.assertAlmostEqual(progress(18.5), 25)
        self.assertAlmostEqual(progress(25), 50)
        self.assertAlmostEqual(progress(30), 75)
        self.assertEqual(progress(40), 100)
        self.assertEqual(progress(55), 100)

    def test_missing_values(self):
        with self.assertRaisesRegex(ToolInputError, 'both weight and height'):
            calculate_bmi(BMIInput(weight=None, height=175))

    def test_non_positive_values(self):
        with self.assertRaisesRegex(ToolInputError, 'valid positive numbers'):
            calculate_bmi(BMIInput(weight=70, height=0))
        with self.assertRaisesRegex(ToolInputError, 'valid positive numbers'):
            calculate_bmi(BMIInput(weight=-1, height=170))

    def test_unknown_unit(self):
        with self.assertRaises(ToolInputError):
            calculate_bmi(BMIInput(weight=70, height=175, weight_unit='stone'))


if __name__ == '__main__':
    unittest.main()
