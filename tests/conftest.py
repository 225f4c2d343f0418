import os

# Keep tests away from any real cluster credentials on the machine
os.environ.setdefault("KUBECONFIG", "/nonexistent/kubeconfig")

from tests.fixtures import *  # noqa: F401,F403
