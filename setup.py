#       Licensed to the Apache Software Foundation (ASF) under one
#       or more contributor license agreements.  See the NOTICE file
#       distributed with this work for additional information
#       regarding copyright ownership.  The ASF licenses this file
#       to you under the Apache License, Version 2.0 (the
#       "License"); you may not use this file except in compliance
#       with the License.  You may obtain a copy of the License at
#
#         http://www.apache.org/licenses/LICENSE-2.0
#
#       Unless required by applicable law or agreed to in writing,
#       software distributed under the License is distributed on an
#       "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY
#       KIND, either express or implied.  See the License for the
#       specific language governing permissions and limitations
#       under the License.

from setuptools import setup, find_packages
__version__ = "undefined"
exec(open('akismetclient/version.py').read())  # noqa: S102

PROJECT_DESCRIPTION = '''
Client for the Akismet comment spam service: checks comments for spam,
reports missed spam and false positives, and verifies API keys.
'''
setup(
    name='AkismetClient',
    version=__version__,
    description='Akismet comment spam service client',
    long_description=PROJECT_DESCRIPTION,
    classifiers=[
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP',
    ],
    keywords='akismet spam comments',
    license='Apache License, http://www.apache.org/licenses/LICENSE-2.0',
    packages=find_packages(exclude=['ez_setup', 'examples']),
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.8',
    install_requires=[
        'PasteDeploy',
    ],
    extras_require={
        'test': [
            'pytest',
            'mock',
        ],
    },
)
