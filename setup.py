from setuptools import setup, find_packages

setup(
    name='csgforge',
    version='0.1.0',
    author='nassimberrada',
    author_email='your.email@example.com',
    description='A Python library for building closed triangle-mesh solids from primitives, 2D profiles and boolean composition.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    url='https://github.com/yourusername/csgforge',
    packages=find_packages(exclude=['tests', 'examples']),
    include_package_data=True,
    install_requires=[
        'numpy',
        'trimesh',
        'manifold3d',
        'mapbox-earcut',
    ],
    extras_require={
        'test': [
            'pytest',
        ]
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Intended Audience :: Manufacturing',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Multimedia :: Graphics :: 3D Modeling',
    ],
    python_requires='>=3.8',
)
