from setuptools import find_packages, setup
import codecs
import os.path

def read(rel_path):
    here = os.path.abspath(os.path.dirname(__file__))
    with codecs.open(os.path.join(here, rel_path), 'r') as fp:
        return fp.read()

def get_version(rel_path):
    for line in read(rel_path).splitlines():
        if line.startswith('__version__'):
            delim = '"' if '"' in line else "'"
            return line.split(delim)[1]
    else:
        raise RuntimeError("Unable to find version string.")

with open("README.md", "r") as readme_file:
    long_description = readme_file.read()

setup(
    name='ogrpy',
    version=get_version("ogrpy/__init__.py"),
    license='Apache 2.0',
    description='Enumeration of rulers and Golomb rulers, by tree traversal and by id',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["ogrpy", "ogrpy.*"]),
    include_package_data=True,
    zip_safe=False,
    install_requires=[
        'numpy>=1.17',
        'ortools>=9.8',
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["ogrpy=ogrpy.cli:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3 :: Only",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.8'
)
