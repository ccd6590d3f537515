# -*- coding: utf-8 -*-
import os
import shutil
import tempfile

import yaml


class TempDirMixin(object):

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def write_file(self, name, content, mode='w'):
        path = os.path.join(self.tmpdir, name)
        with open(path, mode) as fp:
            fp.write(content)
        return path

    def write_config(self, confdata, name='config.yaml'):
        return self.write_file(name, yaml.safe_dump(confdata))


class FakeLoader(object):

    def __init__(self, xml):
        self.xml = xml
        self.locations = []

    def load(self, location):
        self.locations.append(location)
        return self.xml
