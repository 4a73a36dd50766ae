import pathlib
import setuptools


def parse_reqs(filename):
  requirements = pathlib.Path(filename)
  requirements = requirements.read_text().split('\n')
  requirements = [x for x in requirements if x.strip()]
  return requirements


setuptools.setup(
    name='hashvec',
    version='0.2.0',
    description='Ordered map whose entries can be read by key or by position',
    long_description=pathlib.Path('README.md').read_text(),
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(),
    package_data={'hashvec': ['configs.yaml']},
    include_package_data=True,
    install_requires=parse_reqs('requirements.txt'),
    extras_require={'test': ['pytest', 'numpy']},
    classifiers=[
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
)
