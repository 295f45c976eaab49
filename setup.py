import os
import re
import subprocess

from setuptools import setup, find_packages, Command

__author__ = 'Eric Hulser'
__email__ = 'eric.hulser@gmail.com'
__license__ = 'MIT'

INSTALL_REQUIRES = []
DEPENDENCY_LINKS = []
TESTS_REQUIRE = []
LONG_DESCRIPTION = ''


class Tag(Command):
    description = 'Generates the version information from the current git commit and tags the repo.'
    user_options = [
        ('no-tag', None, 'Do not tag the repo before releasing')
    ]

    def initialize_options(self):
        self.no_tag = False

    def finalize_options(self):
        pass

    def run(self):
        cmd = ['git', 'describe', '--match', 'v[0-9]*.[0-9]*.0']
        desc = subprocess.check_output(cmd).decode('utf-8').strip()
        result = re.match(r'v([0-9]+)\.([0-9]+)\.0-([0-9]+)-(.*)', desc)

        print('generating version information from:', desc)
        with open('./enumfield/_version.py', 'w') as f:
            f.write('__major__ = {0}\n'.format(result.group(1)))
            f.write('__minor__ = {0}\n'.format(result.group(2)))
            f.write('__revision__ = "{0}"\n'.format(result.group(3)))
            f.write('__hash__ = "{0}"'.format(result.group(4)))

        if not self.no_tag:
            version = '.'.join([result.group(1), result.group(2), result.group(3)])

            print('creating git tag:', 'v' + version)

            os.system('git tag -a v{0} -m "releasing {0}"'.format(version))
            os.system('git push --tags')
        else:
            print('warning: tagging ignored...')


def read_requirements_file(path):
    """
    reads requirements.txt file and handles PyPI index URLs
    :param path: (str) path to requirements.txt file
    :return: (tuple of lists)
    """
    last_pypi_url = None
    with open(path) as f:
        requires = []
        pypi_urls = []
        for line in f.readlines():
            line = line.strip()
            if not line:
                continue
            if '--' in line:
                match = re.match(r'--index-url\s+([\w\d:/.-]+)', line)
                if match:
                    last_pypi_url = match.group(1)
                    if not last_pypi_url.endswith('/'):
                        last_pypi_url += '/'
            else:
                if last_pypi_url:
                    pypi_urls.append(last_pypi_url + line.lower())
                requires.append(line)
    return requires, pypi_urls


try:
    with open('enumfield/_version.py', 'r') as f:
        content = f.read()
        major = re.search(r'__major__ = (\d+)', content).group(1)
        minor = re.search(r'__minor__ = (\d+)', content).group(1)
        rev = re.search(r'__revision__ = "([^"]+)"', content).group(1)
        VERSION = '.'.join((major, minor, rev))
except (IOError, AttributeError):
    VERSION = '0.0.0'

# parse the requirements file
if os.path.isfile('requirements.txt'):
    _install_requires, _pypi_urls = read_requirements_file('requirements.txt')
    INSTALL_REQUIRES.extend(_install_requires)
    DEPENDENCY_LINKS.extend(_pypi_urls)

if os.path.isfile('tests/requirements.txt'):
    _tests_require, _pypi_urls = read_requirements_file('tests/requirements.txt')
    TESTS_REQUIRE.extend(_tests_require)
    DEPENDENCY_LINKS.extend(_pypi_urls)

# Get the long description from the relevant file
if os.path.isfile('README.md'):
    with open('README.md') as f:
        LONG_DESCRIPTION = f.read()

setup(
    name='enumfield',
    version=VERSION,
    author=__author__,
    author_email=__email__,
    maintainer=__author__,
    maintainer_email=__email__,
    description='Enum attributes backed by scalar storage fields.',
    license=__license__,
    keywords='',
    install_requires=INSTALL_REQUIRES,
    packages=find_packages(include=['enumfield', 'enumfield.*']),
    python_requires='>=3.6',
    extras_require={'test': TESTS_REQUIRE},
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    cmdclass={
        'tag': Tag
    }
)
