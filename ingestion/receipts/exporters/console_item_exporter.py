# MIT License
#
# Copyright (c) 2018 Evgeny Medvedev, evge.medvedev@gmail.com
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
#
# Modified By: Legacy Receipts Import contributors, 19/10/2026
# Change Description: Prints decoded legacy receipts by their export field names.

import json
from typing import Iterable

from pydantic import BaseModel


class ConsoleItemExporter(object):
    def open(self):
        pass

    def export_items(self, items: Iterable[BaseModel]):
        for item in items:
            self.export_item(item)

    def export_item(self, item: BaseModel):
        item_dict = item.model_dump(mode="json", by_alias=True)
        item_type = type(item).__name__
        print(f"[{item_type.upper()}]: {json.dumps(item_dict, indent=2)}")

    def close(self):
        pass
