from setuptools import setup, find_packages

setup (
    name = "intervallic",
    version = "0.1.0",
    description = "Note and interval algebra with reverse lookup of chords and scales.",
    long_description = open ( 'README.md', encoding = "utf-8" ).read ( ),
    long_description_content_type = "text/markdown",
    package_dir = { "": "src" },
    packages = find_packages ( "src" ),
    install_requires = [
        "numpy",
        "bidict",
        "pyrsistent",
        "sortedcontainers",
    ],
    classifiers = [
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Topic :: Multimedia :: Sound/Audio",
    ],
    python_requires = ">=3.12",
)
