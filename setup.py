"""Uses setuptools to install the pyease module"""
import setuptools
import os

setuptools.setup(
    name='pyease',
    version='0.1.0',
    author='Timothy Moore',
    author_email='mtimothy984@gmail.com',
    description='Easing functions with lookup by identifier or name',
    license='CC0',
    keywords='pyease easing tweening animations',
    url='https://github.com/tjstretchalot/pyease',
    packages=['pyease'],
    long_description=open(
        os.path.join(os.path.dirname(__file__), 'README.md')).read(),
    long_description_content_type='text/markdown',
    install_requires=['pytypeutils', 'Pillow'],
    extras_require={'test': ['pytest']},
    classifiers=(
        'Programming Language :: Python :: 3',
        'License :: CC0 1.0 Universal (CC0 1.0) Public Domain Dedication',
        'Topic :: Utilities'),
    python_requires='>=3.7',
)
