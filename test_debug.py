import importlib
import logging
import unittest as ut

from debug import COMPONENTS, ROOT_LOGGER, Debug


class DebugTest(ut.TestCase):
    def setUp(self):
        self.dbg = Debug("ROTOR-test")

    def test_components_start_disabled(self):
        self.assertEqual(set(COMPONENTS), set(self.dbg.status()))
        self.assertFalse(any(self.dbg.status().values()))

    def test_enable_disable_toggle(self):
        self.dbg.enable("rotor", "stepping")
        self.assertTrue(self.dbg.is_enabled("rotor"))
        self.dbg.disable("rotor")
        self.assertFalse(self.dbg.is_enabled("rotor"))
        self.dbg.toggle("stepping")
        self.assertFalse(self.dbg.is_enabled("stepping"))

    def test_global_switch(self):
        self.dbg.enable("encipher")
        self.dbg.toggle_global(False)
        self.assertFalse(self.dbg.is_enabled("encipher"))

    def test_unknown_component(self):
        with self.assertRaises(ValueError):
            self.dbg.enable("plugboard")
        with self.assertRaises(ValueError):
            self.dbg.get_logger("plugboard")

    def test_component_loggers_are_children_of_the_root(self):
        self.assertEqual("ROTOR-test.rotor", self.dbg.get_logger("rotor").name)

    def test_only_enabled_components_log(self):
        self.dbg.enable("rotor")
        with self.assertLogs("ROTOR-test", level="DEBUG") as cm:
            self.dbg.get_logger("rotor").debug("hello")
            self.dbg.get_logger("stepping").debug("muted")
        self.assertEqual(["DEBUG:ROTOR-test.rotor:hello"], cm.output)

    def test_warnings_pass_even_when_disabled(self):
        with self.assertLogs("ROTOR-test", level="DEBUG") as cm:
            self.dbg.get_logger("settings").warning("loud")
        self.assertEqual(1, len(cm.output))

    def test_status_is_a_copy(self):
        self.dbg.status()["rotor"] = True
        self.assertFalse(self.dbg.is_enabled("rotor"))


class ImportSideEffectTest(ut.TestCase):
    def test_importing_modules_leaves_root_logger_alone(self):
        root = logging.getLogger()
        level, handlers = root.level, list(root.handlers)
        for name in ("keyboard", "rotor_and_reflector", "rotor_bank", "machine", "settings"):
            importlib.import_module(name)
        Debug("ROTOR-fresh")
        self.assertEqual(level, root.level)
        self.assertEqual(handlers, root.handlers)

    def test_library_logger_has_a_null_handler(self):
        handlers = logging.getLogger(ROOT_LOGGER).handlers
        self.assertTrue(any(isinstance(h, logging.NullHandler) for h in handlers))


if __name__ == '__main__':
    ut.main()
