"""Installation recipe."""

import os

from setuptools import find_packages, setup

here = os.path.abspath(os.path.dirname(__file__))

version: "dict[str, str]" = {}
with open(os.path.join(here, 'basissculpt', '_version.py'), 'r', encoding='utf8') as f:
    exec(f.read(), version)


def readme() -> str:
    """Load readme."""
    with open(os.path.join(here, 'README.rst'), 'r', encoding='utf8') as f:
        return f.read()


def parse_requirements(path: "str | os.PathLike[str]") -> "list[str]":
    """Parse a ``requirements.txt`` file and strip all empty and commented lines."""
    ret = []
    with open(os.path.join(here, path), "r", encoding="utf8") as f:
        for i in f:
            j = i.split("#", 1)[0].strip().rstrip()
            if j:
                ret.append(j)
    return ret


setup(
    name='basis-sculpt',
    version=version['__version__'],
    description='Norm analysis and renormalization of contracted Gaussian basis sets',
    license='BSD-3-Clause',
    url='https://doi.org/10.1039/D5CP01681A',
    author='M. Macernis',
    keywords='chemistry basis-set gaussian normalization',
    long_description=readme() + '\n\n',
    long_description_content_type='text/x-rst',
    packages=find_packages(exclude=["test"]),
    classifiers=[
        'License :: OSI Approved :: BSD License',
        'Natural Language :: English',
        'Operating System :: MacOS',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: Implementation :: CPython',
        'Development Status :: 4 - Beta',
        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering :: Chemistry',
        'Typing :: Typed',
    ],
    install_requires=parse_requirements("install_requirements.txt"),
    python_requires='>=3.10',
    extras_require={
        'test': parse_requirements("test_requirements.txt"),
    },
    package_data={
        'basissculpt': ['py.typed']
    },
    entry_points={
        'console_scripts': [
            'basissculpt=basissculpt.workflows.run_workflow:main',
        ]
    },
)
