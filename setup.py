from importlib.util import module_from_spec, spec_from_file_location

from setuptools import find_packages, setup


def load_version(filename):
    spec = spec_from_file_location("version", filename)
    module = module_from_spec(spec)
    spec.loader.exec_module(module)
    return module.VERSION


def load_text(filename):
    with open(filename) as fd:
        return fd.read()


def load_requirements(filename):
    return load_text(filename).splitlines()


requirements = load_requirements("requirements.txt")
test_requirements = load_requirements("requirements-dev.txt")

setup(
    name='davfile',
    description='WebDAV file storage backend for upload layers',
    long_description=load_text('README.md'),
    long_description_content_type='text/markdown',
    version=load_version('davfile/version.py'),
    packages=find_packages(exclude=('tests', 'tests*')),
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
    tests_require=test_requirements,
    extras_require={'test': test_requirements},
    install_requires=requirements,
    python_requires='>=3.8',
)
