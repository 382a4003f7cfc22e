import os
import re
import subprocess
from setuptools import setup, find_packages, Command

root_dir = os.path.abspath(os.path.dirname(__file__))

# Read the version without importing the package, whose dependencies may not
# be installed yet.
with open(os.path.join(root_dir, 'nuget_frameworks', 'app_version.py')) as f:
    version = re.search(r"version = '(.*)'", f.read()).group(1)


class Coverage(Command):
    description = 'run tests with code coverage'
    user_options = [
        ('test-suite=', 's',
         "test suite to run (e.g. 'some_module.test_suite')"),
    ]

    def initialize_options(self):
        self.test_suite = None

    def finalize_options(self):
        pass

    def run(self):
        env = dict(os.environ)
        env['COVERAGE_FILE'] = os.path.join(root_dir, '.coverage')

        subprocess.run(['coverage', 'erase'], check=True)
        subprocess.run(
            ['coverage', 'run', '--source=nuget_frameworks', '-m',
             'unittest', 'discover'] +
            (['-q'] if self.verbose == 0 else []) +
            (['-k', self.test_suite] if self.test_suite else []),
            env=env, check=True
        )
        subprocess.run(['coverage', 'report'], check=True)


custom_cmds = {
    'coverage': Coverage,
}

with open(os.path.join(root_dir, 'README.md'), 'r') as f:
    long_desc = f.read()

setup(
    name='nuget-frameworks',
    version=version,

    description='Parse and compare NuGet target framework monikers',
    long_description=long_desc,
    long_description_content_type='text/markdown',
    keywords='nuget target framework moniker tfm',

    license='BSD-3-Clause',

    classifiers=[
        'Development Status :: 3 - Alpha',

        'Intended Audience :: Developers',

        'Topic :: Software Development :: Build Tools',
        'License :: OSI Approved :: BSD License',

        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],

    packages=find_packages(exclude=['test', 'test.*']),
    package_data={'nuget_frameworks': ['data/*.yaml']},

    python_requires='>=3.8',
    install_requires=['colorama', 'importlib_metadata', 'importlib_resources',
                      'packaging', 'pyyaml'],
    extras_require={
        'dev': ['coverage', 'flake8 >= 3.7', 'flake8-quotes'],
        'test': ['coverage', 'flake8 >= 3.7', 'flake8-quotes'],
    },

    entry_points={
        'console_scripts': [
            'nuget-framework=nuget_frameworks.driver:main',
        ],
        'nuget_frameworks.mappings': [
            'default=nuget_frameworks.mappings:DefaultFrameworkMappings',
        ],
    },

    test_suite='test',
    cmdclass=custom_cmds,
)
