class TermQRError(Exception):
    """termqr 所有异常的基类"""


class ContractViolation(TermQRError):
    """调用方违反接口约定引发的异常，代表程序缺陷，不应被捕获"""


class SurfaceBoundsError(ContractViolation, IndexError):
    """向画布范围之外的坐标写入像素"""


class SurfaceConsumedError(ContractViolation, RuntimeError):
    """画布已被转换为图像后仍被修改或再次转换"""


class InputError(TermQRError, ValueError):
    """因为用户输入不正确引发的异常"""


class EmptyDataError(InputError):
    """没有可编码的数据"""


class EncodeError(InputError):
    """数据无法编码为二维码"""


class ConfigError(InputError):
    """配置项不合法"""
