import os, shutil, tempfile, unittest
from srp6a.config import Config
from srp6a.errors import UnsupportedParameterSet
from srp6a.parameters import Params2048, Params3072
from srp6a.store import MemoryHandshakeStore, RedisHandshakeStore

class Defaults(unittest.TestCase):
    def test_defaults(self):
        c = Config.from_env({})
        self.assertEqual(c.params_bits, 2048)
        self.assertIs(c.params(), Params2048)
        self.assertEqual(c.handshake_ttl, 60)
        self.assertIsNone(c.redis_url)
        self.assertIsNone(c.decoy_seed)
        self.assertIsInstance(c.make_store(), MemoryHandshakeStore)

class Environment(unittest.TestCase):
    def test_from_env(self):
        c = Config.from_env({"SRP_PARAMS": "3072",
                             "SRP_HANDSHAKE_TTL": "120",
                             "SRP_REDIS_URL": "redis://localhost:6379/3",
                             "SRP_KEY_PREFIX": "login_",
                             "SRP_DECOY_SEED": "00ff" * 16,
                             })
        self.assertIs(c.params(), Params3072)
        self.assertEqual(c.handshake_ttl, 120)
        self.assertEqual(c.decoy_seed, b"\x00\xff" * 16)
        store = c.make_store()
        self.assertIsInstance(store, RedisHandshakeStore)
        self.assertEqual(store.key_prefix, b"login_")
        self.assertIs(store.params, Params3072)

    def test_empty_values_use_defaults(self):
        c = Config.from_env({"SRP_PARAMS": "", "SRP_REDIS_URL": ""})
        self.assertEqual(c.params_bits, 2048)
        self.assertIsNone(c.redis_url)

    def test_invalid(self):
        self.assertRaises(UnsupportedParameterSet, Config.from_env,
                          {"SRP_PARAMS": "512"})
        self.assertRaises(ValueError, Config.from_env,
                          {"SRP_PARAMS": "big"})
        self.assertRaises(ValueError, Config.from_env,
                          {"SRP_HANDSHAKE_TTL": "0"})
        self.assertRaises(ValueError, Config.from_env,
                          {"SRP_HANDSHAKE_TTL": "soon"})
        self.assertRaises(ValueError, Config.from_env,
                          {"SRP_DECOY_SEED": "not hex"})

class DotEnv(unittest.TestCase):
    def setUp(self):
        self.basedir = tempfile.mkdtemp()
        self.path = os.path.join(self.basedir, ".env")
        with open(self.path, "w") as f:
            f.write("SRP_PARAMS=3072\n")
            f.write("SRP_HANDSHAKE_TTL=45\n")

    def tearDown(self):
        shutil.rmtree(self.basedir)

    def test_from_dotenv(self):
        c = Config.from_dotenv(self.path, environ={})
        self.assertEqual(c.params_bits, 3072)
        self.assertEqual(c.handshake_ttl, 45)

    def test_environment_wins(self):
        c = Config.from_dotenv(self.path,
                               environ={"SRP_HANDSHAKE_TTL": "90"})
        self.assertEqual(c.params_bits, 3072)
        self.assertEqual(c.handshake_ttl, 90)

    def test_missing_file(self):
        c = Config.from_dotenv(os.path.join(self.basedir, "nope"),
                               environ={})
        self.assertEqual(c.params_bits, 2048)

if __name__ == '__main__':
    unittest.main()
