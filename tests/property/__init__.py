"""
牌组属性测试

使用hypothesis进行基于属性的测试
"""
