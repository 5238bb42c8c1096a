from rich.console import Console
from rich.pretty import pprint

from argbundle import *


def callback():
    pass


if __name__ == '__main__':
    console = Console(stderr=True)
    bundle = ArgumentsBundle(["file.txt"], {"debug": True}, callback)
    pprint(bundle)
    console.print(empty())
    try:
        bundle.get(3.5)
    except InvalidKeyType as fault:
        console.print(fault)
