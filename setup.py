import re
from pathlib import Path

from setuptools import setup, find_packages

version = re.search(r'^__version__ = "([^"]+)"',
                    Path(__file__).parent.joinpath("sitebuild", "__init__.py").read_text(),
                    re.MULTILINE).group(1)

setup(
    name='sitebuild',
    version=version,
    description='Web application build tasks runner: assets bundling, development server, tests and docs',
    long_description='Clean, bundle and minify static assets, then serve, test and document a web application.',
    long_description_content_type="text/x-rst",
    packages=find_packages(include=['sitebuild', 'sitebuild.*']),
    entry_points={
        'console_scripts': ['sitebuild=sitebuild:sitebuild']},
    license='MIT License',
    python_requires=">=3.8",
    install_requires=[
        'click >= 8.0',
        'rich >= 12.0',
        'PyYAML >= 6.0',
        'yaenv == 1.2.2',
        'jsmin >= 3.0',
        'rcssmin >= 1.1',
    ],
    extras_require={
        'test': ['pytest >= 7.0'],
    },
    keywords=['BUILD', 'ASSETS', 'MINIFY', 'TASKS'],
    classifiers=[
         'Development Status :: 3 - Alpha',
         'Intended Audience :: Developers',
         'Topic :: Software Development :: Build Tools',
         'License :: OSI Approved :: MIT License',
         'Programming Language :: Python :: 3',
    ],
)
