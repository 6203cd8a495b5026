"""setup.py file."""
from setuptools import setup, find_packages

with open("README.md", "r") as f:
    readme = f.read()


requires = [
    'requests>=2.27.1',
    'urllib3>=1.26.0',
    'setuptools>=39.2.0'

]
setup(
    name="wugal",
    version="1.0.0",
    packages=find_packages(where='src'),
    package_dir={"":"src"},
    package_data={"wugal": ["templates/*.html"]},
    description="WhatsUp Gold API Abstraction Layer",
    license="Apache 2.0",
    long_description=readme,
    long_description_content_type="text/markdown",
    classifiers=[
        "Topic :: Utilities",
        "Topic :: System :: Networking :: Monitoring",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: POSIX :: Linux",
        "Operating System :: MacOS",
        "Operating System :: Microsoft :: Windows",
    ],
    include_package_data=True,
    install_requires=requires,
    extras_require={"test": ["pytest>=7.0"]},
    python_requires='>=3.8',
)
