import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='ItemModel',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('sku', models.CharField(max_length=20, unique=True, verbose_name='商品SKU')),
                ('name', models.CharField(max_length=255, verbose_name='商品名称')),
                ('description', models.TextField(blank=True, default='', verbose_name='商品描述')),
                ('price_amount', models.BigIntegerField(verbose_name='价格金额(分)')),
                ('price_currency', models.CharField(default='USD', max_length=3, verbose_name='价格货币')),
                ('category_name', models.CharField(max_length=100, verbose_name='分类名称')),
                ('category_slug', models.CharField(max_length=100, verbose_name='分类标识')),
                ('inventory_quantity', models.IntegerField(default=0, verbose_name='库存数量')),
                ('images', models.JSONField(blank=True, default=list, verbose_name='商品图片')),
                ('attributes', models.JSONField(blank=True, default=dict, verbose_name='商品属性')),
                ('status', models.CharField(
                    choices=[('draft', '草稿'), ('active', '激活'), ('inactive', '未激活'), ('archived', '已归档')],
                    default='draft',
                    max_length=20,
                    verbose_name='商品状态',
                )),
                ('created_at', models.DateTimeField(verbose_name='创建时间')),
                ('updated_at', models.DateTimeField(verbose_name='更新时间')),
            ],
            options={
                'verbose_name': '商品',
                'verbose_name_plural': '商品',
                'db_table': 'items',
                'indexes': [
                    models.Index(fields=['category_slug'], name='idx_items_category_slug'),
                    models.Index(fields=['status'], name='idx_items_status'),
                    models.Index(fields=['created_at'], name='idx_items_created_at'),
                    models.Index(fields=['inventory_quantity'], name='idx_items_inventory'),
                    models.Index(
                        condition=models.Q(('inventory_quantity__gt', 0), ('status', 'active')),
                        fields=['created_at'],
                        name='idx_items_available',
                    ),
                ],
                'constraints': [
                    models.CheckConstraint(
                        condition=models.Q(('price_amount__gte', 0)), name='items_price_amount_gte_0'
                    ),
                    models.CheckConstraint(
                        condition=models.Q(('inventory_quantity__gte', 0)), name='items_inventory_quantity_gte_0'
                    ),
                    models.CheckConstraint(
                        condition=models.Q(('status__in', ['draft', 'active', 'inactive', 'archived'])),
                        name='items_status_valid',
                    ),
                ],
            },
        ),
    ]
