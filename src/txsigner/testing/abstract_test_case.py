import logging
import unittest


class AbstractTestCase(unittest.TestCase):
    """
    Base class for unit tests. Keeps library log output visible at debug level.
    """

    @classmethod
    def setUpClass(cls):
        super().setUpClass()
        logging.basicConfig(level=logging.DEBUG)
        logging.getLogger("txsigner").setLevel(logging.DEBUG)
