#!/usr/bin/env python

import timeit
from setuptools import setup, Command

cmdclass = {}

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
            for i in range(0, 10):
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

        for params in ["Params2048", "Params3072", "Params4096",
                       "Params6144", "Params8192"]:
            S1 = "from srp6 import SRP6, UserDetails, %s" % params
            S2 = "srp = SRP6(params=%s)" % params
            S3 = ("s, v = srp.generate_new_user_secrets('Bob', 'pw');"
                  " user = UserDetails('Bob', s, v)")
            S4 = "h, pv = srp.start_handshake(user)"
            S5 = "proof, spv = h.calculate_proof('Bob', 'pw')"
            S6 = "m2, key = pv.verify_proof(proof)"

            register = do([S1, S2], S3)
            start = do([S1, S2, S3], S4)
            prove = do([S1, S2, S3, S4], S5)
            full = do([S1, S2, S3], ";".join([S4, S5, S6]))
            print("%-10s: register=%6s, start=%6s, prove=%6s, full=%6s"
                  % (params, abbrev(register), abbrev(start), abbrev(prove),
                     abbrev(full)))
cmdclass["speed"] = Speed

setup(name="srp6",
      version="0.1.0",
      description="SRP6a password-authenticated key exchange (pure python)",
      package_dir={"": "src"},
      packages=["srp6", "srp6.parameters", "srp6.test"],
      license="MIT",
      cmdclass=cmdclass,
      classifiers=[
          "Intended Audience :: Developers",
          "License :: OSI Approved :: MIT License",
          "Programming Language :: Python",
          "Programming Language :: Python :: 3",
          "Topic :: Security :: Cryptography",
          ],
      install_requires=["hkdf"],
      )
