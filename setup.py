#!/usr/bin/env python

import timeit
from setuptools import setup, Command

class Speed(Command):
    description = "run speed benchmarks"
    user_options = []
    boolean_options = []
    def initialize_options(self):
        pass
    def finalize_options(self):
        pass
    def run(self):
        def do(setup_statements, statement):
            # extracted from timeit.py
            t = timeit.Timer(stmt=statement,
                             setup="\n".join(setup_statements))
            # determine number so that 0.2 <= total time < 2.0
            for i in range(1, 10):
                number = 10**i
                x = t.timeit(number)
                if x >= 0.2:
                    break
            return x / number

        def abbrev(t):
            if t > 1.0:
                return "%.3fs" % t
            if t > 1e-3:
                return "%.1fms" % (t*1e3)
            return "%.1fus" % (t*1e6)

        for bits in [1024, 2048, 3072, 4096]:
            S1 = ("from srp6a import SRPServer, SRPClient, load_params, "
                  "create_verifier")
            S2 = "params = load_params(%d)" % bits
            S3 = "salt, v = create_verifier(b'alice', b'pw', params=params)"
            S4 = "c = SRPClient(b'alice', b'pw', salt, params=params)"
            S5 = "s = SRPServer(v, params=params)"
            S6 = "s.set_A(c.compute_A())"
            S7 = "c.set_B(s.compute_B())"
            S8 = "s.check_M1(c.compute_M1())"

            begin = do([S1, S2, S3], S5)
            full = do([S1, S2, S3], ";".join([S4, S5, S6, S7, S8]))
            print("%4d-bit: begin=%6s, full=%6s"
                  % (bits, abbrev(begin), abbrev(full)))

setup(name="srp6a",
      version="0.1.0",
      description="SRP-6a password authentication engine (pure python)",
      package_dir={"": "src"},
      packages=["srp6a", "srp6a.parameters", "srp6a.test"],
      license="MIT",
      cmdclass={"speed": Speed},
      python_requires=">=3.7",
      classifiers=[
          "Intended Audience :: Developers",
          "License :: OSI Approved :: MIT License",
          "Programming Language :: Python",
          "Programming Language :: Python :: 3",
          "Topic :: Security :: Cryptography",
          ],
      install_requires=["hkdf", "redis>=4.0", "python-dotenv"],
      )
