import unittest

from officetools.domain.errors import ToolInputError
from officetools.domain.navigation import NavigationState
from officetools.domain.registry import (
    ALL_CATEGORY,
    CATEGORIES,
    TOOLS,
    get_tool,
    get_tools_by_category,
    search_tools,
)


class RegistryTests(unittest.TestCase):
    def test_ids_unique_and_categories_known(self):
        category_ids = {category.id for category in CATEGORIES}
        self.assertEqual(len({tool.id for tool in TOOLS}), len(TOOLS))
        for tool in TOOLS:
            self.assertIn(tool.category, category_ids)
            self.assertNotEqual(tool.category, ALL_CATEGORY)

    def test_implemented_tools_registered(self):
        for tool_id in ('bmi-calculator', 'photo-cropper', 'text-to-speech', 'file-compressor'):
            self.assertIsNotNone(get_tool(tool_id), tool_id)
        self.assertEqual(get_tool('photo-cropper').route, '/tools/photo-cropper')
        self.assertIsNone(get_tool('nope'))

    def test_all_category_lists_every_tool(self):
        self.assertEqual(len(get_tools_by_category(ALL_CATEGORY)), len(TOOLS))
        calculators = get_tools_by_category('calculators')
        self.assertTrue(calculators)
        self.assertTrue(all(tool.category == 'calculators' for tool in calculators))

    def test_search_is_case_insensitive(self):
        ids = [tool.id for tool in search_tools('bmi')]
        self.assertIn('bmi-calculator', ids)
        self.assertEqual(ids, [tool.id for tool in search_tools('BMI')])

    def test_search_matches_description_and_category(self):
        self.assertIn('file-compressor', [tool.id for tool in search_tools('zip archive')])
        self.assertIn('bmi-calculator', [tool.id for tool in search_tools('CALCULATORS')])

    def test_blank_search_returns_nothing(self):
        self.assertEqual(search_tools('   '), [])


class NavigationTests(unittest.TestCase):
    def test_defaults(self):
        state = NavigationState()
        self.assertEqual(state.title(), 'All Tools')
        self.assertEqual(len(state.visible_tools()), len(TOOLS))

    def test_search_wins_over_category(self):
        state = NavigationState()
        state.select_category('media')
        state.set_search('bmi')
        self.assertTrue(state.is_searching)
        self.assertEqual(state.title(), 'Search Results for "bmi"')
        self.assertIn('bmi-calculator', [tool.id for tool in state.visible_tools()])

    def test_selecting_category_clears_search(self):
        state = NavigationState()
        state.set_search('pdf')
        state.select_category('calculators')
        self.assertEqual(state.search_query, '')
        self.assertEqual(state.title(), 'Calculators')

    def test_empty_search_message(self):
        state = NavigationState()
        state.set_search('zzzz-no-such-tool')
        self.assertEqual(state.visible_tools(), [])
        self.assertIn('zzzz-no-such-tool', state.empty_message())

    def test_unknown_category(self):
        with self.assertRaises(ToolInputError):
            NavigationState().select_category('games')


if __name__ == '__main__':
    unittest.main()
