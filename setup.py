import setuptools
import codecs
import os

# Version is passed in by the release workflow, defaults for local builds
VERSION = os.environ.get("OAUTHSIGN_VERSION", "1.0.0")

# Determine the directory containing this setup.py file
setup_dir = os.path.dirname(os.path.abspath(__file__))
readme_path = os.path.join(setup_dir, "README.md")

with codecs.open(readme_path, "r", "utf-8") as fh:
    long_description = fh.read()

required = []
requirements_path = os.path.join(setup_dir, "requirements.txt")
with open(requirements_path, "r") as freq:
    for line in freq.read().split():
        required.append(line)

setuptools.setup(
    name="oauthsign",
    version=VERSION,
    author="oauthsign contributors",

    description="OAuth 1.0a HMAC-SHA1 request signing (RFC 5849).",
    long_description=long_description,
    long_description_content_type="text/markdown",

    package_dir={'': 'libs'},
    packages=['oauthsign', 'oauthsign.test', 'oauthsign.test.mock_server'],
    include_package_data=True,

    install_requires=required,
    extras_require={
        "test": ["pytest", "flask"],
    },
    entry_points={
        "console_scripts": [
            "oauth_sign=oauthsign.cli:main",
        ],
    },
    python_requires='>=3.8',

    license="BSD-2 Clause",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: BSD License"
     ],
)
