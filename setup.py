"""
Installs the image toolbox module.
"""

#from os.path import join, abspath, dirname
from setuptools import setup, find_packages

setup(
    name='image-toolbox',
    version='0.1.0',
    description='Histogram equalization and block comparison of RGB images',
    #long_description=open(join(abspath(dirname(__file__)), 'README.md'), encoding='utf-8').read(),
    #long_description_content_type='text/markdown',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Science/Research',
        'Topic :: Multimedia :: Graphics :: Editors :: Raster-Based',
        'Topic :: Scientific/Engineering :: Image Recognition',
        'Programming Language :: Python :: 3',
    ],
    keywords='image-processing histogram-equalization block-comparison psnr',
    packages=find_packages(exclude=['contrib', 'docs', 'tests']),
    python_requires='>=3.8, <4',
    install_requires=['numpy>=1.15', 'scipy>=1'],
    extras_require={'test': ['pytest']},
)
